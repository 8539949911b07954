"""Settings that govern the confstore library itself.

These are never overlaid on documents held by a ``ConfigStore``; they only control how the library logs. Values are
resolved from, in order of precedence: constructor kwargs, environment variables (``CONFSTORE_LOGGER__USE_STRUCTLOG``),
a ``.env`` file and finally the packaged ``config.ini``.
"""

from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel
from pydantic_settings import BaseSettings

from confstore.utils import expand_tilde, load_ini_as_dict


class CONFSTORE_DIR_PATHS(BaseModel):
    ROOT: str
    LOGGER_DIR: str
    STRUCT_LOGGER_DIR: str


class CONFSTORE_LOGGER(BaseModel):
    USE_STRUCTLOG: bool = False
    STRUCTLOG_JSON: bool = True
    ADD_FILE_HANDLER: bool = False
    STREAM_LEVEL: str = "ERROR"


def load_ini_settings() -> Dict[str, Any]:
    ini_path = Path(__file__).parent / "config.ini"
    return load_ini_as_dict(ini_path)


class ConfStoreSettings(BaseSettings):
    CONFSTORE_DIR_PATHS: CONFSTORE_DIR_PATHS
    CONFSTORE_LOGGER: CONFSTORE_LOGGER

    model_config = {
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        def env_settings_expanded():
            return expand_tilde(env_settings())

        return (
            init_settings,  # constructor kwargs
            env_settings_expanded,  # env vars (with '~' expanded) take precedence
            dotenv_settings,  # then .env
            load_ini_settings,  # then INI file (lowest precedence)
            file_secret_settings,
        )
