import logging
from typing import Optional

from dashboard.commands.base import BaseInteractor
from services.upload_download import ReportFileSaver, UploadsDownloader

log = logging.getLogger(__name__)


class DownloadUploadsInteractor(BaseInteractor):
    def get_downloader(self, destination: Optional[str] = None) -> UploadsDownloader:
        return UploadsDownloader(saver=ReportFileSaver(destination))

    async def execute(self, provider, grouped_uploads, destination=None) -> None:
        downloader = self.get_downloader(destination)
        log.info(
            "Downloading uploads",
            extra=dict(
                provider=provider, destination=str(downloader.saver.destination)
            ),
        )
        await downloader.download_all(provider, grouped_uploads)
