from dashboard.commands.base import BaseInteractor
from reports.types import uploads_from_nodes
from services.uploads import ExtractedUploads, UploadsFilters, extract_uploads


class ExtractUploadsInteractor(BaseInteractor):
    def execute(self, uploads, filters=None) -> ExtractedUploads:
        """
        `uploads` is a commit's uploads as returned by the API (a list of nodes
        or a connection) and `filters` the snake cased filters input.
        """
        if not isinstance(filters, UploadsFilters):
            filters = UploadsFilters.from_input(filters)
        return extract_uploads(uploads_from_nodes(uploads), filters)
