import logging

from django.apps import AppConfig
from django.conf import settings

from utils.config import RUN_ENV

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    name = "core"

    def ready(self):
        cache_alias = settings.IGNORED_UPLOAD_IDS_CACHE_ALIAS
        backend = settings.CACHES.get(cache_alias, {}).get("BACKEND", "")

        if RUN_ENV not in ["DEV", "TESTING"] and backend.endswith("LocMemCache"):
            # every process would keep its own copy of the ignored upload ids
            logger.warning(
                "Ignored upload ids are kept in memory",
                extra=dict(cache_alias=cache_alias, backend=backend),
            )
