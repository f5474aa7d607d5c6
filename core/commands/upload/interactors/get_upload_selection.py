from asgiref.sync import sync_to_async

from dashboard.commands.base import BaseInteractor
from services.upload_selection import UploadSelection, load_upload_selection


class GetUploadSelectionInteractor(BaseInteractor):
    @sync_to_async
    def execute(self, grouped_uploads) -> UploadSelection:
        # read only, observing a (possibly filtered) grouping changes nothing
        selection = load_upload_selection(self.session_key)
        selection.observe_all(grouped_uploads)
        return selection
