"""Utility functions shared across the confstore package."""

from confstore.utils.checks import ifnone
from confstore.utils.ini import load_ini_as_dict
from confstore.utils.paths import expand_tilde, expand_tilde_str

__all__ = [
    "expand_tilde",
    "expand_tilde_str",
    "ifnone",
    "load_ini_as_dict",
]
