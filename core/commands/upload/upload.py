from dashboard.commands.base import BaseCommand

from .interactors.download_uploads import DownloadUploadsInteractor
from .interactors.extract_uploads import ExtractUploadsInteractor
from .interactors.get_ignored_upload_ids import GetIgnoredUploadIdsInteractor
from .interactors.get_upload_errors import GetUploadErrorsInteractor
from .interactors.get_upload_selection import GetUploadSelectionInteractor
from .interactors.get_upload_warnings import GetUploadWarningsInteractor
from .interactors.toggle_upload import ToggleUploadInteractor
from .interactors.toggle_upload_group import ToggleUploadGroupInteractor


class UploadCommands(BaseCommand):
    def get_upload_errors(self, upload):
        return self.get_interactor(GetUploadErrorsInteractor).execute(upload)

    def get_upload_warnings(self, upload):
        return self.get_interactor(GetUploadWarningsInteractor).execute(upload)

    def extract_uploads(self, uploads, filters=None):
        return self.get_interactor(ExtractUploadsInteractor).execute(uploads, filters)

    def get_upload_selection(self, grouped_uploads):
        return self.get_interactor(GetUploadSelectionInteractor).execute(
            grouped_uploads
        )

    def get_ignored_upload_ids(self):
        return self.get_interactor(GetIgnoredUploadIdsInteractor).execute()

    def toggle_upload_group(self, grouped_uploads, provider):
        return self.get_interactor(ToggleUploadGroupInteractor).execute(
            grouped_uploads, provider
        )

    def toggle_upload(self, grouped_uploads, provider, index):
        return self.get_interactor(ToggleUploadInteractor).execute(
            grouped_uploads, provider, index
        )

    def download_uploads(self, provider, grouped_uploads, destination=None):
        return self.get_interactor(DownloadUploadsInteractor).execute(
            provider, grouped_uploads, destination=destination
        )
