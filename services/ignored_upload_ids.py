import logging
from typing import Iterable, List, Optional

from django.conf import settings
from django.core.cache import BaseCache, caches

log = logging.getLogger(__name__)

IGNORED_UPLOAD_IDS_CACHE_KEY = "IgnoredUploadIds"


def ignored_upload_ids_key(session_key: Optional[str] = None) -> str:
    if session_key:
        return f"{IGNORED_UPLOAD_IDS_CACHE_KEY}:{session_key}"
    return IGNORED_UPLOAD_IDS_CACHE_KEY


class IgnoredUploadIdsCache:
    """
    Shared, ordered list of upload ids that should be left out when coverage
    totals are recomputed. The selection engine writes to it and whoever
    recomputes coverage reads from it, both going through this class with the
    same cache alias and key.

    Writes are read-then-write: read the current list, compute the next one,
    replace it.
    """

    def __init__(
        self,
        cache: Optional[BaseCache] = None,
        key: str = IGNORED_UPLOAD_IDS_CACHE_KEY,
        timeout: Optional[int] = None,
    ):
        self.cache = cache or caches[settings.IGNORED_UPLOAD_IDS_CACHE_ALIAS]
        self.key = key
        self.timeout = (
            timeout
            if timeout is not None
            else settings.IGNORED_UPLOAD_IDS_CACHE_TIMEOUT
        )

    def get_ids(self) -> List[int]:
        return list(self.cache.get(self.key) or [])

    def _set_ids(self, ids: List[int]) -> None:
        self.cache.set(self.key, ids, timeout=self.timeout)

    def update(
        self, add: Iterable[Optional[int]] = (), remove: Iterable[Optional[int]] = ()
    ) -> List[int]:
        """
        Append the ids in `add` that aren't there yet and drop the ids in
        `remove`. Missing ids (`None`) are skipped.
        """
        to_remove = {upload_id for upload_id in remove if upload_id is not None}
        next_ids = [
            upload_id for upload_id in self.get_ids() if upload_id not in to_remove
        ]
        for upload_id in add:
            if upload_id is not None and upload_id not in next_ids:
                next_ids.append(upload_id)

        self._set_ids(next_ids)
        log.debug(
            "Updated ignored upload ids",
            extra=dict(cache_key=self.key, ignored_upload_ids=next_ids),
        )
        return next_ids

    def add_ids(self, ids: Iterable[Optional[int]]) -> List[int]:
        return self.update(add=ids)

    def remove_ids(self, ids: Iterable[Optional[int]]) -> List[int]:
        return self.update(remove=ids)

    def clear(self) -> None:
        self.cache.delete(self.key)
