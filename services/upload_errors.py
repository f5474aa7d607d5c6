from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from graphql_api.types.enums import UploadErrorCategory, UploadErrorEnum, UploadState
from reports.types import Upload, UploadErrorEntry

KNOWN_ERROR_CATEGORIES = {
    UploadErrorEnum.FILE_NOT_IN_STORAGE: UploadErrorCategory.FILE_NOT_FOUND_IN_STORAGE,
    UploadErrorEnum.REPORT_EXPIRED: UploadErrorCategory.REPORT_EXPIRED,
    UploadErrorEnum.REPORT_EMPTY: UploadErrorCategory.REPORT_EMPTY,
}

EXPIRED_REPORTS_DOC_URL = (
    "https://docs.codecov.com/docs/codecov-yaml#section-expired-reports"
)
UNUSABLE_REPORTS_DOC_URL = (
    "https://docs.codecov.com/docs/error-reference#unusable-reports"
)

MULTIPLE_FLAGS_WARNING = (
    "Multiple flags detected. Uploads with more than one flag can make flag "
    "coverage harder to interpret."
)


@dataclass(frozen=True)
class ErrorMessage:
    message: str
    doc_url: Optional[str] = None
    doc_link_text: Optional[str] = None


ERROR_MESSAGES = {
    UploadErrorCategory.FILE_NOT_FOUND_IN_STORAGE: ErrorMessage(
        message="Processing failed. Please rerun the upload in a new commit.",
    ),
    UploadErrorCategory.REPORT_EXPIRED: ErrorMessage(
        message=(
            "Upload exceeds the max age of 12h. Please review your expired "
            "reports settings."
        ),
        doc_url=EXPIRED_REPORTS_DOC_URL,
        doc_link_text="expired reports",
    ),
    UploadErrorCategory.REPORT_EMPTY: ErrorMessage(
        message=(
            "Unusable report due to issues such as source code unavailability, "
            "path mismatch, empty report, or incorrect data format. Please visit "
            "our troubleshooting document for assistance."
        ),
        doc_url=UNUSABLE_REPORTS_DOC_URL,
        doc_link_text="troubleshooting document",
    ),
    UploadErrorCategory.UNKNOWN_ERROR: ErrorMessage(message="Unknown error"),
}


@dataclass(frozen=True)
class CategorizedError:
    category: UploadErrorCategory
    count: int


@dataclass(frozen=True)
class UploadErrorDisplay:
    category: UploadErrorCategory
    count: int = 1

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.category].message

    @property
    def doc_url(self) -> Optional[str]:
        return ERROR_MESSAGES[self.category].doc_url

    @property
    def doc_link_text(self) -> Optional[str]:
        return ERROR_MESSAGES[self.category].doc_link_text

    @property
    def text(self) -> str:
        if self.count > 1:
            return f"{self.message} ({self.count})"
        return self.message


def categorize_error_code(error_code: Any) -> UploadErrorCategory:
    """
    Map a raw error code onto one of the known categories. Anything we don't
    know how to explain (new codes, `None`, nested objects, ...) is an
    unknown error.
    """
    if isinstance(error_code, UploadErrorEnum):
        return KNOWN_ERROR_CATEGORIES[error_code]
    if not isinstance(error_code, str):
        return UploadErrorCategory.UNKNOWN_ERROR

    for error_enum, category in KNOWN_ERROR_CATEGORIES.items():
        if error_code in (error_enum.name, error_enum.value):
            return category
    return UploadErrorCategory.UNKNOWN_ERROR


def classify_upload_errors(
    errors: Optional[Iterable[Optional[UploadErrorEntry]]],
) -> List[CategorizedError]:
    """
    Collapse an upload's raw errors into one row per category, counting how
    many entries fell into each. Rows come out in order of first appearance.
    """
    counts: Dict[UploadErrorCategory, int] = {}
    for error in errors or []:
        if error is None:
            continue
        category = categorize_error_code(error.error_code)
        counts[category] = counts.get(category, 0) + 1

    return [
        CategorizedError(category=category, count=count)
        for category, count in counts.items()
    ]


def upload_error_displays(upload: Upload) -> List[UploadErrorDisplay]:
    displays = [
        UploadErrorDisplay(category=error.category, count=error.count)
        for error in classify_upload_errors(upload.errors)
    ]

    # the upload failed but nothing told us why
    if not displays and upload.state == UploadState.ERROR:
        displays.append(UploadErrorDisplay(category=UploadErrorCategory.UNKNOWN_ERROR))

    return displays


def upload_warnings(upload: Upload) -> List[str]:
    if upload.has_multiple_flags:
        return [MULTIPLE_FLAGS_WARNING]
    return []
