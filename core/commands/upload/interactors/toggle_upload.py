from asgiref.sync import sync_to_async

from dashboard.commands.base import BaseInteractor
from dashboard.commands.exceptions import ValidationError
from services.upload_selection import (
    ProviderGroupSelection,
    load_upload_selection,
    save_upload_selection,
)


class ToggleUploadInteractor(BaseInteractor):
    def validate(self, index) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise ValidationError("Upload index must be an integer")

    @sync_to_async
    def execute(
        self, grouped_uploads, provider: str, index: int
    ) -> ProviderGroupSelection:
        self.validate(index)
        selection = load_upload_selection(self.session_key)
        selection.observe_all(grouped_uploads)
        selection.toggle_upload(provider, index)
        save_upload_selection(selection, self.session_key)
        return selection.get_group(provider)
