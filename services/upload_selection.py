import logging
from typing import Dict, Iterable, List, Optional, Set, Union

from django.conf import settings
from django.core.cache import caches

from dashboard.commands.exceptions import NotFound, ValidationError
from graphql_api.types.enums import SelectionState
from reports.types import Upload
from services.ignored_upload_ids import IgnoredUploadIdsCache, ignored_upload_ids_key

log = logging.getLogger(__name__)

SelectionKey = Union[int, str]


def derive_selection_state(selected_count: int, total: int) -> SelectionState:
    if selected_count >= total:
        return SelectionState.ALL_SELECTED
    if selected_count == 0:
        return SelectionState.NONE_SELECTED
    return SelectionState.SOME_SELECTED


class ProviderGroupSelection:
    """
    A provider group as it is displayed, along with which of its members are
    selected. The group may be a filtered view of the provider's uploads, so
    the selection itself is the set of deselected uploads (by their
    `selection_key`) and the indices are derived from it.
    """

    def __init__(
        self,
        provider: str,
        uploads: List[Upload],
        deselected_keys: Optional[Set[SelectionKey]] = None,
    ):
        self.provider = provider
        self.uploads = list(uploads)
        self.deselected_keys: Set[SelectionKey] = (
            deselected_keys if deselected_keys is not None else set()
        )

    @property
    def selected(self) -> Set[int]:
        return {
            index
            for index, upload in enumerate(self.uploads)
            if upload.selection_key not in self.deselected_keys
        }

    @property
    def state(self) -> SelectionState:
        return derive_selection_state(len(self.selected), len(self.uploads))

    @property
    def selected_indices(self) -> List[int]:
        return sorted(self.selected)

    def is_selected(self, index: int) -> bool:
        return index in self.selected

    def ids_at(self, indices: Iterable[int]) -> List[Optional[int]]:
        return [self.uploads[index].id for index in sorted(indices)]


class UploadSelection:
    """
    Per provider selection of uploads, stored as the uploads each provider
    has deselected. Groups observed from any view of the uploads, filtered or
    not, read and write that same store, so looking at a view never changes
    the selection. Every transition writes the difference it made to the
    ignored upload ids: uploads that got deselected are ignored, uploads that
    got selected again stop being ignored.
    """

    def __init__(
        self,
        ignored_upload_ids: IgnoredUploadIdsCache,
        deselected_keys: Optional[Dict[str, Iterable[SelectionKey]]] = None,
    ):
        self.ignored_upload_ids = ignored_upload_ids
        self.deselected_keys: Dict[str, Set[SelectionKey]] = {
            provider: set(keys) for provider, keys in (deselected_keys or {}).items()
        }
        self.groups: Dict[str, ProviderGroupSelection] = {}

    def observe(self, provider: str, uploads: List[Upload]) -> ProviderGroupSelection:
        """
        Track the group as currently displayed. Uploads never deselected
        before start out selected.
        """
        group = ProviderGroupSelection(
            provider, uploads, self.deselected_keys.setdefault(provider, set())
        )
        self.groups[provider] = group
        return group

    def observe_all(self, grouped_uploads: Dict[str, List[Upload]]) -> None:
        for provider, uploads in grouped_uploads.items():
            self.observe(provider, uploads)

    def get_group(self, provider: str) -> ProviderGroupSelection:
        group = self.groups.get(provider)
        if group is None:
            raise NotFound(f"No uploads for provider {provider}")
        return group

    def state(self, provider: str) -> SelectionState:
        return self.get_group(provider).state

    def toggle_group(self, provider: str) -> SelectionState:
        group = self.get_group(provider)
        if group.state == SelectionState.NONE_SELECTED:
            next_selected = set(range(len(group.uploads)))
        else:
            next_selected = set()
        self._transition(group, next_selected)
        return group.state

    def toggle_upload(self, provider: str, index: int) -> SelectionState:
        group = self.get_group(provider)
        if not 0 <= index < len(group.uploads):
            raise ValidationError(
                f"Upload index {index} is out of range for provider {provider}"
            )

        next_selected = group.selected
        if index in next_selected:
            next_selected.remove(index)
        else:
            next_selected.add(index)
        self._transition(group, next_selected)
        return group.state

    def _transition(self, group: ProviderGroupSelection, next_selected: Set[int]):
        current = group.selected
        deselected = current - next_selected
        reselected = next_selected - current

        for index in deselected:
            group.deselected_keys.add(group.uploads[index].selection_key)
        for index in reselected:
            group.deselected_keys.discard(group.uploads[index].selection_key)

        if deselected or reselected:
            self.ignored_upload_ids.update(
                add=group.ids_at(deselected), remove=group.ids_at(reselected)
            )
        log.debug(
            "Toggled upload selection",
            extra=dict(
                provider=group.provider,
                selection_state=group.state.name,
                selected_indices=group.selected_indices,
            ),
        )

    def snapshot(self) -> Dict[str, List[SelectionKey]]:
        return {
            provider: sorted(keys, key=str)
            for provider, keys in self.deselected_keys.items()
            if keys
        }


UPLOAD_SELECTION_CACHE_KEY = "UploadSelection"


def upload_selection_key(session_key: Optional[str] = None) -> str:
    if session_key:
        return f"{UPLOAD_SELECTION_CACHE_KEY}:{session_key}"
    return UPLOAD_SELECTION_CACHE_KEY


def load_upload_selection(session_key: Optional[str] = None) -> UploadSelection:
    """
    Rebuild a session's selection along with the ignored upload ids it keeps
    in sync. Both live in the same cache so they share a lifecycle.
    """
    cache = caches[settings.IGNORED_UPLOAD_IDS_CACHE_ALIAS]
    ignored_upload_ids = IgnoredUploadIdsCache(
        cache=cache, key=ignored_upload_ids_key(session_key)
    )
    return UploadSelection(
        ignored_upload_ids,
        deselected_keys=cache.get(upload_selection_key(session_key)),
    )


def save_upload_selection(
    selection: UploadSelection, session_key: Optional[str] = None
) -> None:
    cache = caches[settings.IGNORED_UPLOAD_IDS_CACHE_ALIAS]
    cache.set(
        upload_selection_key(session_key),
        selection.snapshot(),
        timeout=settings.IGNORED_UPLOAD_IDS_CACHE_TIMEOUT,
    )
