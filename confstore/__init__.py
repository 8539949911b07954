from confstore.config import ConfigStore, ConfStoreSettings, Value, ValueKind
from confstore.exceptions import (
    ConfigIOError,
    ConfigStoreError,
    NoSuchKey,
    ParseError,
    RequiredSettingError,
    SerializationError,
    TypeMismatch,
)
from confstore.logging.logger import get_logger, setup_logger

setup_logger()  # Initialize the default logger

from confstore.entrypoint import exit_on_config_error

__all__ = [
    "ConfigIOError",
    "ConfigStore",
    "ConfigStoreError",
    "ConfStoreSettings",
    "exit_on_config_error",
    "get_logger",
    "NoSuchKey",
    "ParseError",
    "RequiredSettingError",
    "SerializationError",
    "setup_logger",
    "TypeMismatch",
    "Value",
    "ValueKind",
]
