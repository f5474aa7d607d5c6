import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Union

from graphql_api.types.enums import UploadState, UploadType

log = logging.getLogger(__name__)

NO_PROVIDER_KEY = "none"
NO_PROVIDER_LABEL = "not specified"


@dataclass(frozen=True)
class UploadErrorEntry:
    """
    A single error reported for an upload. The error code is kept as it was
    received (it can be a string, `None` or something malformed) and it is up
    to the classifier to decide what it means.
    """

    error_code: Any = None

    @classmethod
    def from_node(cls, node: Any) -> Optional["UploadErrorEntry"]:
        if node is None:
            return None
        if isinstance(node, UploadErrorEntry):
            return node
        if isinstance(node, Mapping):
            return cls(error_code=node.get("errorCode", node.get("error_code")))
        # not shaped like an error entry at all, keep it so it's counted
        return cls(error_code=node)


def _connection_nodes(value: Any) -> List[Any]:
    """
    Uploads and their errors can come either as a plain list or wrapped in a
    GraphQL connection (`{"edges": [{"node": ...}]}`)
    """
    if value is None:
        return []
    if isinstance(value, Mapping):
        edges = value.get("edges") or []
        return [
            edge.get("node") if isinstance(edge, Mapping) else edge for edge in edges
        ]
    return list(value)


def _parse_state(value: Any) -> Optional[UploadState]:
    if value is None or isinstance(value, UploadState):
        return value
    try:
        return UploadState[str(value).upper()]
    except KeyError:
        log.warning("Unrecognized upload state", extra=dict(state=value))
        return None


def _parse_upload_type(value: Any) -> UploadType:
    if isinstance(value, UploadType):
        return value
    if value is None:
        return UploadType.UPLOADED
    normalized = str(value).upper().replace("_", "")
    try:
        return UploadType[normalized]
    except KeyError:
        log.warning("Unrecognized upload type", extra=dict(upload_type=value))
        return UploadType.UPLOADED


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class Upload:
    """
    A coverage report submission for a commit, as listed in the commit's
    uploads. Only `state` and `provider` really matter to the grouping; every
    other field is optional and missing values fall back to defaults.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    state: Optional[UploadState] = None
    provider: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    flags: List[str] = field(default_factory=list)
    download_url: Optional[str] = None
    ci_url: Optional[str] = None
    upload_type: UploadType = UploadType.UPLOADED
    job_code: Optional[str] = None
    build_code: Optional[str] = None
    errors: List[Optional[UploadErrorEntry]] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: Mapping[str, Any]) -> "Upload":
        return cls(
            id=node.get("id"),
            name=node.get("name"),
            state=_parse_state(node.get("state")),
            provider=node.get("provider"),
            created_at=node.get("createdAt"),
            updated_at=node.get("updatedAt"),
            flags=list(node.get("flags") or []),
            download_url=node.get("downloadUrl"),
            ci_url=node.get("ciUrl"),
            upload_type=_parse_upload_type(node.get("uploadType")),
            job_code=node.get("jobCode"),
            build_code=node.get("buildCode"),
            errors=[
                UploadErrorEntry.from_node(error)
                for error in _connection_nodes(node.get("errors"))
            ],
        )

    @property
    def label(self) -> Optional[str]:
        return self.name or self.build_code

    @property
    def provider_key(self) -> str:
        return self.provider or NO_PROVIDER_KEY

    @property
    def is_carried_forward(self) -> bool:
        return self.upload_type == UploadType.CARRIEDFORWARD

    @property
    def has_multiple_flags(self) -> bool:
        return len(self.flags) >= 2

    @property
    def selection_key(self) -> Union[int, str]:
        """
        Identifies the upload across groupings, whatever filters produced
        them. Uploads without an id fall back to their report's url.
        """
        if self.id is not None:
            return self.id
        return self.download_url or f"{self.created_at}:{self.label}"

    @property
    def created_at_datetime(self) -> Optional[datetime]:
        return parse_timestamp(self.created_at)


def uploads_from_nodes(nodes: Any) -> List[Upload]:
    """
    Build `Upload` records out of a commit's `uploads` field, skipping empty
    edges.
    """
    return [
        node if isinstance(node, Upload) else Upload.from_node(node)
        for node in _connection_nodes(nodes)
        if node is not None
    ]


def provider_label(provider_key: str) -> str:
    if provider_key == NO_PROVIDER_KEY:
        return NO_PROVIDER_LABEL
    return provider_key


def flatten_grouped_uploads(grouped: Mapping[str, Iterable[Upload]]) -> List[Upload]:
    return [upload for uploads in grouped.values() for upload in uploads]
