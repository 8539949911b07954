"""
Configuration module for confstore.

Provides the JSON-backed `ConfigStore` container together with the settings that control the library itself.
"""

from confstore.config.settings import ConfStoreSettings, load_ini_settings
from confstore.config.store import ConfigStore, Value
from confstore.config.values import ValueKind, kind_of

__all__ = ["ConfigStore", "ConfStoreSettings", "kind_of", "load_ini_settings", "Value", "ValueKind"]
