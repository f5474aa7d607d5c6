from typing import List

from dashboard.commands.base import BaseInteractor
from reports.types import Upload
from services.upload_errors import upload_warnings


class GetUploadWarningsInteractor(BaseInteractor):
    def execute(self, upload: Upload) -> List[str]:
        return upload_warnings(upload)
