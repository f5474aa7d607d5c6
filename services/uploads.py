import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from graphql_api.types.enums import UploadState
from reports.types import NO_PROVIDER_KEY, Upload, flatten_grouped_uploads

log = logging.getLogger(__name__)

GroupedUploads = Dict[str, List[Upload]]

# order in which the buckets show up in the overview sentence
OVERVIEW_PHRASES = ("uploaded", "started", "errored", "successful", "carried forward")

STATE_PHRASES = {
    UploadState.UPLOADED: "uploaded",
    UploadState.STARTED: "started",
    UploadState.ERROR: "errored",
    UploadState.PROCESSED: "successful",
    UploadState.COMPLETE: "successful",
}


@dataclass(frozen=True)
class UploadsFilters:
    flag_errors: bool = False
    upload_errors: bool = False
    search_term: str = ""

    @classmethod
    def from_input(cls, data: Optional[dict]) -> "UploadsFilters":
        data = data or {}
        return cls(
            flag_errors=bool(data.get("flag_errors", False)),
            upload_errors=bool(data.get("upload_errors", False)),
            search_term=data.get("search_term") or "",
        )

    @property
    def normalized_search_term(self) -> str:
        return self.search_term.strip().lower()

    @property
    def is_searching(self) -> bool:
        return bool(self.normalized_search_term)

    @property
    def is_active(self) -> bool:
        return self.flag_errors or self.upload_errors or self.is_searching

    def cleared(self) -> "UploadsFilters":
        return UploadsFilters()


@dataclass
class ExtractedUploads:
    grouped_uploads: GroupedUploads = field(default_factory=dict)
    uploads_provider_list: List[str] = field(default_factory=list)
    uploads_overview: str = ""
    errored_uploads: GroupedUploads = field(default_factory=dict)
    flag_error_uploads: GroupedUploads = field(default_factory=dict)
    search_results: List[Upload] = field(default_factory=list)
    has_no_uploads: bool = True
    filters: UploadsFilters = field(default_factory=UploadsFilters)

    @property
    def visible_groups(self) -> GroupedUploads:
        # searching shows a flat list of results instead of the provider groups
        if self.filters.is_searching:
            return {}
        return self.grouped_uploads

    @property
    def errored_uploads_count(self) -> int:
        return sum(len(uploads) for uploads in self.errored_uploads.values())

    @property
    def flag_error_uploads_count(self) -> int:
        return sum(len(uploads) for uploads in self.flag_error_uploads.values())


def remove_duplicate_carried_forward_uploads(uploads: Iterable[Upload]) -> List[Upload]:
    """
    A carried forward upload is superseded as soon as a regular upload covers
    one of its flags, so those are dropped. Carried forward uploads with no
    matching regular upload are kept.
    """
    uploads = list(uploads)
    uploaded_flags = {
        flag
        for upload in uploads
        if not upload.is_carried_forward
        for flag in upload.flags
    }
    return [
        upload
        for upload in uploads
        if not (
            upload.is_carried_forward
            and any(flag in uploaded_flags for flag in upload.flags)
        )
    ]


def _newest_first(uploads: List[Upload]) -> List[Upload]:
    # uploads sharing a timestamp list the latest submission (highest id)
    # first; sorted() is stable so sorting again keeps the same order
    return sorted(
        uploads,
        key=lambda upload: (
            upload.created_at_datetime is not None,
            upload.created_at_datetime,
            upload.id is not None,
            upload.id if upload.id is not None else 0,
        ),
        reverse=True,
    )


def group_uploads_by_provider(uploads: Iterable[Upload]) -> GroupedUploads:
    """
    Group uploads by their CI provider. Providers keep the order they were
    first seen in, except for uploads without a provider which always come
    last.
    """
    grouped: GroupedUploads = {}
    for upload in uploads:
        grouped.setdefault(upload.provider_key, []).append(upload)

    if NO_PROVIDER_KEY in grouped:
        grouped[NO_PROVIDER_KEY] = grouped.pop(NO_PROVIDER_KEY)

    return {provider: _newest_first(members) for provider, members in grouped.items()}


def summarize_uploads(uploads: Iterable[Upload]) -> str:
    counts = dict.fromkeys(OVERVIEW_PHRASES, 0)
    for upload in uploads:
        if upload.is_carried_forward:
            counts["carried forward"] += 1
        elif upload.state in STATE_PHRASES:
            counts[STATE_PHRASES[upload.state]] += 1

    return ", ".join(
        f"{count} {phrase}" for phrase, count in counts.items() if count > 0
    )


def filter_grouped_uploads(
    grouped: GroupedUploads, predicate: Callable[[Upload], bool]
) -> GroupedUploads:
    filtered = {
        provider: [upload for upload in uploads if predicate(upload)]
        for provider, uploads in grouped.items()
    }
    return {provider: uploads for provider, uploads in filtered.items() if uploads}


def is_errored(upload: Upload) -> bool:
    return upload.state == UploadState.ERROR


def has_flag_error(upload: Upload) -> bool:
    return upload.has_multiple_flags


def matches_search_term(upload: Upload, search_term: str) -> bool:
    search_term = search_term.strip().lower()
    if not search_term:
        return True
    haystack = [upload.label, upload.job_code, *upload.flags]
    return any(
        search_term in value.lower() for value in haystack if isinstance(value, str)
    )


def extract_uploads(
    unfiltered_uploads: Optional[Iterable[Upload]] = None,
    filters: Optional[UploadsFilters] = None,
) -> ExtractedUploads:
    """
    Build everything the coverage reports history needs out of a commit's
    uploads: the provider grouping, the one line overview, the error subsets
    (always computed so their counts can be shown) and, when filters are set,
    the reduced grouping or the flat search results.
    """
    filters = filters or UploadsFilters()
    uploads = remove_duplicate_carried_forward_uploads(unfiltered_uploads or [])

    all_grouped = group_uploads_by_provider(uploads)
    errored_uploads = filter_grouped_uploads(all_grouped, is_errored)
    flag_error_uploads = filter_grouped_uploads(all_grouped, has_flag_error)

    grouped_uploads = all_grouped
    if filters.flag_errors or filters.upload_errors:

        def requested(upload: Upload) -> bool:
            return (filters.upload_errors and is_errored(upload)) or (
                filters.flag_errors and has_flag_error(upload)
            )

        grouped_uploads = filter_grouped_uploads(all_grouped, requested)

    search_results: List[Upload] = []
    if filters.is_searching:
        search_results = [
            upload
            for upload in flatten_grouped_uploads(grouped_uploads)
            if matches_search_term(upload, filters.search_term)
        ]
        log.debug(
            "Searched uploads",
            extra=dict(
                search_term=filters.search_term, results=len(search_results)
            ),
        )

    return ExtractedUploads(
        grouped_uploads=grouped_uploads,
        uploads_provider_list=list(grouped_uploads),
        uploads_overview=summarize_uploads(uploads),
        errored_uploads=errored_uploads,
        flag_error_uploads=flag_error_uploads,
        search_results=search_results,
        has_no_uploads=len(uploads) == 0,
        filters=filters,
    )
