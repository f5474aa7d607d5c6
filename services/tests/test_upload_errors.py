import pytest

from graphql_api.types.enums import UploadErrorCategory, UploadErrorEnum, UploadState
from reports.tests.factories import UploadErrorEntryFactory, UploadFactory
from reports.types import UploadErrorEntry
from services.upload_errors import (
    EXPIRED_REPORTS_DOC_URL,
    MULTIPLE_FLAGS_WARNING,
    UNUSABLE_REPORTS_DOC_URL,
    CategorizedError,
    UploadErrorDisplay,
    categorize_error_code,
    classify_upload_errors,
    upload_error_displays,
    upload_warnings,
)


@pytest.mark.parametrize(
    "error_code,category",
    [
        ("FILE_NOT_IN_STORAGE", UploadErrorCategory.FILE_NOT_FOUND_IN_STORAGE),
        ("file_not_in_storage", UploadErrorCategory.FILE_NOT_FOUND_IN_STORAGE),
        (UploadErrorEnum.REPORT_EXPIRED, UploadErrorCategory.REPORT_EXPIRED),
        ("REPORT_EMPTY", UploadErrorCategory.REPORT_EMPTY),
        ("SOME_NEW_ERROR", UploadErrorCategory.UNKNOWN_ERROR),
        (None, UploadErrorCategory.UNKNOWN_ERROR),
        ({"nested": "REPORT_EMPTY"}, UploadErrorCategory.UNKNOWN_ERROR),
        (42, UploadErrorCategory.UNKNOWN_ERROR),
    ],
)
def test_categorize_error_code(error_code, category):
    assert categorize_error_code(error_code) == category


def test_classify_every_kind_of_error():
    errors = [
        UploadErrorEntry(error_code="FILE_NOT_IN_STORAGE"),
        UploadErrorEntry(error_code="REPORT_EXPIRED"),
        UploadErrorEntry(error_code="REPORT_EMPTY"),
        UploadErrorEntry(error_code="SOME_NEW_ERROR"),
    ]

    assert classify_upload_errors(errors) == [
        CategorizedError(UploadErrorCategory.FILE_NOT_FOUND_IN_STORAGE, 1),
        CategorizedError(UploadErrorCategory.REPORT_EXPIRED, 1),
        CategorizedError(UploadErrorCategory.REPORT_EMPTY, 1),
        CategorizedError(UploadErrorCategory.UNKNOWN_ERROR, 1),
    ]


def test_classify_collapses_duplicates():
    errors = [UploadErrorEntryFactory(error_code="REPORT_EMPTY") for _ in range(5)]

    assert classify_upload_errors(errors) == [
        CategorizedError(UploadErrorCategory.REPORT_EMPTY, 5)
    ]


def test_classify_skips_missing_entries():
    errors = [
        None,
        UploadErrorEntry(error_code=None),
        UploadErrorEntry(error_code={"code": "weird"}),
        UploadErrorEntry(error_code="REPORT_EXPIRED"),
        None,
    ]

    classified = classify_upload_errors(errors)

    assert classified == [
        CategorizedError(UploadErrorCategory.UNKNOWN_ERROR, 2),
        CategorizedError(UploadErrorCategory.REPORT_EXPIRED, 1),
    ]
    # counts add up to the non null entries
    assert sum(error.count for error in classified) == 3


def test_classify_nothing():
    assert classify_upload_errors(None) == []
    assert classify_upload_errors([]) == []


class TestUploadErrorDisplays:
    def test_errored_upload_without_errors(self):
        upload = UploadFactory(state=UploadState.ERROR, errors=[])

        assert classify_upload_errors(upload.errors) == []
        assert upload_error_displays(upload) == [
            UploadErrorDisplay(UploadErrorCategory.UNKNOWN_ERROR)
        ]
        assert upload_error_displays(upload)[0].text == "Unknown error"

    def test_errored_upload_with_only_null_errors(self):
        upload = UploadFactory(state=UploadState.ERROR, errors=[None])

        assert upload_error_displays(upload) == [
            UploadErrorDisplay(UploadErrorCategory.UNKNOWN_ERROR)
        ]

    def test_processed_upload_without_errors(self):
        upload = UploadFactory(state=UploadState.PROCESSED, errors=[])

        assert upload_error_displays(upload) == []

    def test_upload_without_state(self):
        assert upload_error_displays(UploadFactory(state=None)) == []

    def test_messages_and_links(self):
        upload = UploadFactory(
            state=UploadState.ERROR,
            errors=[
                UploadErrorEntry(error_code="FILE_NOT_IN_STORAGE"),
                UploadErrorEntry(error_code="REPORT_EXPIRED"),
                UploadErrorEntry(error_code="REPORT_EMPTY"),
            ],
        )

        not_found, expired, empty = upload_error_displays(upload)

        assert not_found.text == (
            "Processing failed. Please rerun the upload in a new commit."
        )
        assert not_found.doc_url is None
        assert expired.text == (
            "Upload exceeds the max age of 12h. Please review your expired "
            "reports settings."
        )
        assert expired.doc_url == EXPIRED_REPORTS_DOC_URL
        assert expired.doc_link_text == "expired reports"
        assert empty.message.startswith("Unusable report due to issues")
        assert empty.doc_url == UNUSABLE_REPORTS_DOC_URL
        assert empty.doc_link_text == "troubleshooting document"

    def test_count_is_annotated(self):
        upload = UploadFactory(
            state=UploadState.ERROR,
            errors=[UploadErrorEntry(error_code="SOMETHING_ELSE")] * 4,
        )

        assert [display.text for display in upload_error_displays(upload)] == [
            "Unknown error (4)"
        ]


def test_upload_warnings():
    assert upload_warnings(UploadFactory(flags=["one", "two"])) == [
        MULTIPLE_FLAGS_WARNING
    ]
    assert upload_warnings(UploadFactory(flags=["one"])) == []
    assert upload_warnings(UploadFactory(flags=[])) == []


def test_upload_warnings_are_independent_of_errors():
    upload = UploadFactory(
        state=UploadState.ERROR,
        flags=["one", "two"],
        errors=[UploadErrorEntry(error_code="REPORT_EMPTY")],
    )

    assert len(upload_warnings(upload)) == 1
    assert len(upload_error_displays(upload)) == 1
