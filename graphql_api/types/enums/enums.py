import enum


class UploadState(enum.Enum):
    STARTED = "started"
    UPLOADED = "uploaded"
    PROCESSED = "processed"
    ERROR = "error"
    COMPLETE = "complete"


class UploadType(enum.Enum):
    UPLOADED = "uploaded"
    CARRIEDFORWARD = "carriedforward"


class UploadErrorEnum(enum.Enum):
    FILE_NOT_IN_STORAGE = "file_not_in_storage"
    REPORT_EXPIRED = "report_expired"
    REPORT_EMPTY = "report_empty"


class UploadErrorCategory(enum.Enum):
    FILE_NOT_FOUND_IN_STORAGE = "fileNotFoundInStorage"
    REPORT_EXPIRED = "reportExpired"
    REPORT_EMPTY = "reportEmpty"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class SelectionState(enum.Enum):
    ALL_SELECTED = "all_selected"
    SOME_SELECTED = "some_selected"
    NONE_SELECTED = "none_selected"
