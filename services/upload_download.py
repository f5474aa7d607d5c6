import asyncio
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Mapping, Optional, Sequence
from urllib.parse import parse_qs, urljoin, urlparse

import requests
import sentry_sdk
from asgiref.sync import sync_to_async
from django.conf import settings
from prometheus_client import Counter

from reports.types import Upload

log = logging.getLogger(__name__)

UPLOADS_DOWNLOAD_COUNTER = Counter(
    "dashboard_uploads_download",
    "Report downloads attempted from the coverage reports history",
    ["result"],
)

DEFAULT_FILENAME = "upload.txt"


def filename_from_download_url(download_url: str) -> str:
    """
    Upload download urls point at the download endpoint with the storage path
    in the `path` query param, e.g.
    `/api/gh/owner/repo/download/build?path=v4/raw/.../<uuid>.txt`. The last
    segment of that path is the report's name; urls without it fall back to
    their own last path segment.
    """
    parsed = urlparse(download_url)
    storage_path = parse_qs(parsed.query).get("path")
    if storage_path and storage_path[0]:
        candidate = storage_path[0]
    else:
        candidate = parsed.path
    filename = candidate.rstrip("/").rsplit("/", 1)[-1]
    return filename or DEFAULT_FILENAME


def downloadable_uploads(
    provider: str, grouped_uploads: Mapping[str, Sequence[Upload]]
) -> List[Upload]:
    """
    The uploads of a provider group that have a report to download.
    """
    return [
        upload
        for upload in grouped_uploads.get(provider) or []
        if upload.download_url
    ]


class ReportFileSaver:
    """
    Saves downloaded reports into a directory. A report is first staged in a
    transient file which is then copied over to its final name; the staged
    file is released no matter what happened in between.
    """

    def __init__(self, destination: Optional[str] = None):
        self.destination = Path(destination or settings.UPLOADS_DOWNLOAD_DIRECTORY)

    def stage(self, content: bytes) -> Path:
        self.destination.mkdir(parents=True, exist_ok=True)
        fd, staged_path = tempfile.mkstemp(prefix=".report-", dir=self.destination)
        staged = Path(staged_path)
        try:
            with os.fdopen(fd, "wb") as staged_file:
                staged_file.write(content)
        except Exception:
            self.release(staged)
            raise
        return staged

    def save(self, staged: Path, filename: str) -> Path:
        """
        Copy a staged report to `filename`, numbering it like browsers do
        ("report (1).txt") when the name is already taken.
        """
        stem, suffix = os.path.splitext(filename)
        attempt = 0
        while True:
            name = filename if attempt == 0 else f"{stem} ({attempt}){suffix}"
            target = self.destination / name
            try:
                with open(target, "xb") as target_file, open(staged, "rb") as source:
                    shutil.copyfileobj(source, target_file)
            except FileExistsError:
                attempt += 1
                continue
            return target

    def release(self, staged: Path) -> None:
        staged.unlink(missing_ok=True)


class UploadsDownloader:
    def __init__(
        self,
        saver: Optional[ReportFileSaver] = None,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        self.saver = saver or ReportFileSaver()
        self.session = session or requests.Session()
        self.base_url = base_url if base_url is not None else settings.CODECOV_API_URL
        self.timeout = timeout or settings.UPLOADS_DOWNLOAD_TIMEOUT

    def absolute_url(self, download_url: str) -> str:
        return urljoin(self.base_url, download_url)

    def fetch(self, download_url: str) -> bytes:
        response = self.session.get(
            self.absolute_url(download_url),
            headers={"User-Agent": "Codecov"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.content

    def save_report(self, upload: Upload, content: bytes) -> Path:
        staged = self.saver.stage(content)
        try:
            filename = filename_from_download_url(upload.download_url)
            return self.saver.save(staged, filename)
        finally:
            self.saver.release(staged)

    async def download_upload(self, provider: str, upload: Upload) -> Optional[Path]:
        try:
            content = await sync_to_async(self.fetch, thread_sensitive=False)(
                upload.download_url
            )
            saved = await sync_to_async(self.save_report, thread_sensitive=False)(
                upload, content
            )
        except Exception as e:
            log.warning(
                f"Failed to download upload {e}",
                extra=dict(
                    provider=provider,
                    upload_id=upload.id,
                    download_url=upload.download_url,
                ),
            )
            UPLOADS_DOWNLOAD_COUNTER.labels(result="failed").inc()
            return None

        UPLOADS_DOWNLOAD_COUNTER.labels(result="saved").inc()
        return saved

    @sentry_sdk.trace
    async def download_all(
        self, provider: str, grouped_uploads: Mapping[str, Sequence[Upload]]
    ) -> None:
        """
        Download every report of a provider group. Each download succeeds or
        fails on its own and nothing is retried: returning only means every
        download was attempted.
        """
        uploads = downloadable_uploads(provider, grouped_uploads)
        if not uploads:
            return

        log.info(
            "Downloading provider uploads",
            extra=dict(provider=provider, uploads=len(uploads)),
        )
        await asyncio.gather(
            *(self.download_upload(provider, upload) for upload in uploads),
            return_exceptions=True,
        )
