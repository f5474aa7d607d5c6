from .enum_types import enum_types
from .enums import (
    SelectionState,
    UploadErrorCategory,
    UploadErrorEnum,
    UploadState,
    UploadType,
)
