import tempfile

from .settings_dev import *

CODECOV_API_URL = "https://api.codecov.io"
UPLOADS_DOWNLOAD_TIMEOUT = 5
UPLOADS_DOWNLOAD_DIRECTORY = tempfile.gettempdir()

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "dashboard-test",
    }
}
IGNORED_UPLOAD_IDS_CACHE_ALIAS = "default"
