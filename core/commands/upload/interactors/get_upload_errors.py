from typing import List

from dashboard.commands.base import BaseInteractor
from reports.types import Upload
from services.upload_errors import UploadErrorDisplay, upload_error_displays


class GetUploadErrorsInteractor(BaseInteractor):
    def execute(self, upload: Upload) -> List[UploadErrorDisplay]:
        return upload_error_displays(upload)
