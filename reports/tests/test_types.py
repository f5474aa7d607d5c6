from datetime import datetime, timezone

from graphql_api.types.enums import UploadState, UploadType
from reports.tests.factories import UploadFactory, upload_node
from reports.types import (
    NO_PROVIDER_KEY,
    Upload,
    UploadErrorEntry,
    flatten_grouped_uploads,
    parse_timestamp,
    provider_label,
    uploads_from_nodes,
)


class TestUploadFromNode:
    def test_all_fields(self):
        upload = Upload.from_node(
            upload_node(
                id=7,
                name="unit",
                state="ERROR",
                provider="circleci",
                flags=["unit", "py3"],
                downloadUrl="/report.txt",
                ciUrl="https://circleci.com/jobs/1",
                uploadType="CARRIED_FORWARD",
                jobCode="job",
                buildCode="build",
                errors=[{"errorCode": "REPORT_EMPTY"}, None, {"errorCode": None}],
            )
        )

        assert upload.id == 7
        assert upload.state == UploadState.ERROR
        assert upload.provider_key == "circleci"
        assert upload.flags == ["unit", "py3"]
        assert upload.upload_type == UploadType.CARRIEDFORWARD
        assert upload.is_carried_forward
        assert upload.has_multiple_flags
        assert upload.errors == [
            UploadErrorEntry(error_code="REPORT_EMPTY"),
            None,
            UploadErrorEntry(error_code=None),
        ]

    def test_missing_fields(self):
        upload = Upload.from_node({})

        assert upload.id is None
        assert upload.state is None
        assert upload.provider_key == NO_PROVIDER_KEY
        assert upload.flags == []
        assert upload.errors == []
        assert upload.upload_type == UploadType.UPLOADED
        assert upload.label is None
        assert not upload.has_multiple_flags

    def test_errors_connection(self):
        upload = Upload.from_node(
            upload_node(
                errors={"edges": [{"node": {"errorCode": "REPORT_EXPIRED"}}]}
            )
        )

        assert upload.errors == [UploadErrorEntry(error_code="REPORT_EXPIRED")]

    def test_lowercase_state_and_type(self):
        upload = Upload.from_node(
            upload_node(state="complete", uploadType="carriedforward")
        )

        assert upload.state == UploadState.COMPLETE
        assert upload.upload_type == UploadType.CARRIEDFORWARD

    def test_unknown_state(self):
        assert Upload.from_node(upload_node(state="EXPLODED")).state is None


def test_error_entry_from_unexpected_value():
    assert UploadErrorEntry.from_node(None) is None
    assert UploadErrorEntry.from_node("REPORT_EMPTY") == UploadErrorEntry(
        error_code="REPORT_EMPTY"
    )
    assert UploadErrorEntry.from_node({"error_code": "REPORT_EMPTY"}) == (
        UploadErrorEntry(error_code="REPORT_EMPTY")
    )


def test_label_falls_back_to_build_code():
    assert UploadFactory(name="unit", build_code="12").label == "unit"
    assert UploadFactory(name=None, build_code="12").label == "12"


def test_selection_key():
    assert UploadFactory(id=3, download_url="/a.txt").selection_key == 3
    assert UploadFactory(id=0).selection_key == 0
    assert UploadFactory(id=None, download_url="/a.txt").selection_key == "/a.txt"
    assert (
        UploadFactory(
            id=None,
            download_url=None,
            created_at="2020-08-25T16:36:19+00:00",
            name="unit",
        ).selection_key
        == "2020-08-25T16:36:19+00:00:unit"
    )


def test_parse_timestamp():
    assert parse_timestamp("2020-08-25T16:36:19.559474+00:00") == datetime(
        2020, 8, 25, 16, 36, 19, 559474, tzinfo=timezone.utc
    )
    assert parse_timestamp("2020-08-25T16:36:19") == datetime(
        2020, 8, 25, 16, 36, 19, tzinfo=timezone.utc
    )
    assert parse_timestamp("yesterday") is None
    assert parse_timestamp(None) is None


def test_uploads_from_nodes():
    existing = UploadFactory(id=10)

    uploads = uploads_from_nodes(
        {"edges": [{"node": upload_node(id=1)}, {"node": None}, {"node": existing}]}
    )

    assert [upload.id for upload in uploads] == [1, 10]
    assert uploads_from_nodes(None) == []


def test_provider_label():
    assert provider_label("none") == "not specified"
    assert provider_label("travis") == "travis"


def test_flatten_grouped_uploads():
    first, second, third = UploadFactory(), UploadFactory(), UploadFactory()

    assert flatten_grouped_uploads({"a": [first, second], "b": [third]}) == [
        first,
        second,
        third,
    ]
