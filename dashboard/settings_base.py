import os

import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration
from sentry_sdk.integrations.redis import RedisIntegration
from sentry_sdk.scrubber import DEFAULT_DENYLIST, EventScrubber

from services.redis_configuration import get_cache_settings
from utils.config import SettingsModule, get_config, get_settings_module

SECRET_KEY = get_config("django", "secret_key", default="*")

# Application definition

INSTALLED_APPS = [
    "core",
]

MIDDLEWARE = []

USE_TZ = True
TIME_ZONE = "UTC"

DATABASES = {}

CACHES = get_cache_settings()

CODECOV_API_URL = get_config("setup", "codecov_api_url")

UPLOADS_DOWNLOAD_TIMEOUT = get_config("setup", "uploads", "download_timeout")
UPLOADS_DOWNLOAD_DIRECTORY = get_config("setup", "uploads", "download_directory")

IGNORED_UPLOAD_IDS_CACHE_ALIAS = get_config(
    "setup", "ignored_upload_ids", "cache_alias"
)
IGNORED_UPLOAD_IDS_CACHE_TIMEOUT = get_config(
    "setup", "ignored_upload_ids", "timeout"
)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(message)s %(asctime)s %(name)s %(levelname)s %(lineno)s %(pathname)s %(funcName)s %(threadName)s",
            "class": "utils.logging_configuration.CustomLocalJsonFormatter",
        },
        "json": {
            "format": "%(message)s %(asctime)s %(name)s %(levelname)s %(lineno)s %(pathname)s %(funcName)s %(threadName)s",
            "class": "utils.logging_configuration.CustomDatadogJsonFormatter",
        },
    },
    "root": {"handlers": ["default"], "level": "INFO", "propagate": True},
    "handlers": {
        "default": {
            "level": "INFO",
            "formatter": (
                "standard"
                if get_settings_module() == SettingsModule.DEV.value
                else "json"
            ),
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",  # Default is stderr
        },
    },
}

SENTRY_ENV = os.environ.get("CODECOV_ENV", False)
SENTRY_DSN = os.environ.get("SERVICES__SENTRY__SERVER_DSN", None)
SENTRY_DENY_LIST = DEFAULT_DENYLIST + ["download_url"]

if SENTRY_DSN is not None:
    SENTRY_SAMPLE_RATE = float(os.environ.get("SERVICES__SENTRY__SAMPLE_RATE", 0.1))
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        event_scrubber=EventScrubber(denylist=SENTRY_DENY_LIST),
        integrations=[
            DjangoIntegration(),
            RedisIntegration(),
        ],
        environment=SENTRY_ENV,
        traces_sample_rate=SENTRY_SAMPLE_RATE,
    )
    if os.getenv("CLUSTER_ENV"):
        sentry_sdk.set_tag("cluster", os.getenv("CLUSTER_ENV"))
