from typing import List

from asgiref.sync import sync_to_async

from dashboard.commands.base import BaseInteractor
from services.ignored_upload_ids import IgnoredUploadIdsCache, ignored_upload_ids_key


class GetIgnoredUploadIdsInteractor(BaseInteractor):
    @sync_to_async
    def execute(self) -> List[int]:
        return IgnoredUploadIdsCache(
            key=ignored_upload_ids_key(self.session_key)
        ).get_ids()
