from django.apps import apps


def test_core_ready_warns_about_memory_cache(mocker, settings):
    settings.CACHES = {
        "default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"}
    }
    mocker.patch("core.apps.RUN_ENV", "PRODUCTION")
    warning = mocker.patch("core.apps.logger.warning")

    apps.get_app_config("core").ready()

    warning.assert_called_once()


def test_core_ready_with_redis(mocker, settings):
    settings.CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.redis.RedisCache",
            "LOCATION": "redis://redis:6379",
        }
    }
    mocker.patch("core.apps.RUN_ENV", "PRODUCTION")
    warning = mocker.patch("core.apps.logger.warning")

    apps.get_app_config("core").ready()

    warning.assert_not_called()
