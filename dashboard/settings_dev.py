from .settings_base import *

DEBUG = True

CODECOV_API_URL = get_config("setup", "codecov_api_url", default="http://localhost")
UPLOADS_DOWNLOAD_DIRECTORY = get_config(
    "setup", "uploads", "download_directory", default="./downloads"
)
