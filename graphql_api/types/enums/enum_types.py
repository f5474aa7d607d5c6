from ariadne import EnumType

from .enums import (
    SelectionState,
    UploadErrorCategory,
    UploadErrorEnum,
    UploadState,
    UploadType,
)

enum_types = [
    EnumType("UploadState", UploadState),
    EnumType("UploadType", UploadType),
    EnumType("UploadErrorEnum", UploadErrorEnum),
    EnumType("UploadErrorCategory", UploadErrorCategory),
    EnumType("SelectionState", SelectionState),
]
