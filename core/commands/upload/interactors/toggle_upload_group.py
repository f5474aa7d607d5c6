import logging

from asgiref.sync import sync_to_async

from dashboard.commands.base import BaseInteractor
from services.upload_selection import (
    ProviderGroupSelection,
    load_upload_selection,
    save_upload_selection,
)

log = logging.getLogger(__name__)


class ToggleUploadGroupInteractor(BaseInteractor):
    @sync_to_async
    def execute(self, grouped_uploads, provider: str) -> ProviderGroupSelection:
        selection = load_upload_selection(self.session_key)
        selection.observe_all(grouped_uploads)
        selection.toggle_group(provider)
        save_upload_selection(selection, self.session_key)

        group = selection.get_group(provider)
        log.info(
            "Toggled upload group",
            extra=dict(provider=provider, selection_state=group.state.name),
        )
        return group
