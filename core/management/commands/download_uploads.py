import json
import logging

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError, CommandParser

from dashboard.commands.executor import Executor
from services.upload_download import downloadable_uploads

log = logging.getLogger(__name__)


class Command(BaseCommand):
    help = (
        "Downloads the reports of every upload a CI provider sent for a commit. "
        "The uploads file holds the commit's uploads as returned by the API."
    )

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--uploads-file", type=str, required=True)
        parser.add_argument(
            "--provider",
            type=str,
            required=True,
            help='CI provider to download from, "none" for uploads without one',
        )
        parser.add_argument("--destination", type=str, default=None)
        parser.add_argument("--service", type=str, default="github")

    def load_uploads(self, uploads_file):
        try:
            with open(uploads_file, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CommandError(f"Could not read uploads from {uploads_file}: {e}")

        # accept the raw commit payload as well as the bare uploads
        if isinstance(data, dict) and "uploads" in data:
            data = data["uploads"]
        if not isinstance(data, (list, dict)):
            raise CommandError(f"No uploads found in {uploads_file}")
        return data

    def handle(self, *args, **options):
        uploads = self.load_uploads(options["uploads_file"])
        provider = options["provider"]

        command = Executor(options["service"]).get_command("upload")
        extracted = command.extract_uploads(uploads)
        if provider not in extracted.grouped_uploads:
            self.stdout.write(f"No uploads found for provider {provider}")
            return

        log.info(
            "Downloading uploads from the command line",
            extra=dict(provider=provider, destination=options["destination"]),
        )
        async_to_sync(command.download_uploads)(
            provider, extracted.grouped_uploads, destination=options["destination"]
        )
        attempted = downloadable_uploads(provider, extracted.grouped_uploads)
        self.stdout.write(
            f"Attempted {len(attempted)} downloads for provider {provider}"
        )
