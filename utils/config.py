import logging
import os
from copy import deepcopy
from enum import Enum

import yaml

log = logging.getLogger(__name__)


class SettingsModule(Enum):
    DEV = "dashboard.settings_dev"
    TESTING = "dashboard.settings_test"
    PRODUCTION = "dashboard.settings_prod"


RUN_ENV = os.environ.get("RUN_ENV", "PRODUCTION")


if RUN_ENV == "DEV":
    settings_module = SettingsModule.DEV.value
elif RUN_ENV == "TESTING":
    settings_module = SettingsModule.TESTING.value
else:
    settings_module = SettingsModule.PRODUCTION.value


def get_settings_module():
    return settings_module


class MissingConfigException(Exception):
    pass


DEFAULT_CONFIG_FILE = "/config/codecov.yml"

default_config = {
    "setup": {
        "codecov_api_url": "https://api.codecov.io",
        "uploads": {
            "download_timeout": 30,
            "download_directory": "/tmp/codecov-uploads",
        },
        "ignored_upload_ids": {"cache_alias": "default", "timeout": 60 * 60 * 24},
    },
    "services": {"redis_url": None},
}


def update(d, u):
    for k, v in u.items():
        if isinstance(v, dict) and isinstance(d.get(k), dict):
            d[k] = update(d[k], v)
        else:
            d[k] = v
    return d


def parse_env_value(value):
    """
    Environment values are strings, let yaml turn "true", "30" and friends into
    the types they'd have in the yaml file
    """
    try:
        return yaml.safe_load(value)
    except yaml.YAMLError:
        return value


class ConfigHelper:
    """
    The configuration comes from three layers, each overriding the previous one:
    the defaults above, the yaml file pointed at by `CODECOV_YML` and environment
    variables named after the path with double underscores
    (`SETUP__CODECOV_API_URL=...` overrides `setup.codecov_api_url`).
    """

    def __init__(self):
        self._params = None

    def load_yaml_file(self):
        yaml_path = os.getenv("CODECOV_YML", DEFAULT_CONFIG_FILE)
        try:
            with open(yaml_path, "r") as yaml_file:
                return yaml.safe_load(yaml_file) or {}
        except FileNotFoundError:
            log.debug("No config file found", extra=dict(path=yaml_path))
            return {}

    def load_env_var(self):
        res = {}
        for env_var, value in os.environ.items():
            if "__" not in env_var:
                continue
            *path, leaf = [part.lower() for part in env_var.split("__")]
            current = res
            for part in path:
                current = current.setdefault(part, {})
                if not isinstance(current, dict):
                    break
            else:
                current[leaf] = parse_env_value(value)
        return res

    @property
    def params(self):
        if self._params is None:
            config = deepcopy(default_config)
            update(config, self.load_yaml_file())
            update(config, self.load_env_var())
            self._params = config
        return self._params

    def get(self, *path):
        current = self.params
        for key in path:
            try:
                current = current[key]
            except (KeyError, TypeError):
                raise MissingConfigException(path)
        return current


config = ConfigHelper()


def get_config(*path, default=None):
    try:
        return config.get(*path)
    except MissingConfigException:
        return default


def reset_config():
    config._params = None
