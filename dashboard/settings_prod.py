from .settings_base import *

DEBUG = False
ALLOWED_HOSTS = get_config("setup", "api_allowed_hosts", default=[".codecov.io"])

CODECOV_API_URL = get_config(
    "setup", "codecov_api_url", default="https://api.codecov.io"
)
