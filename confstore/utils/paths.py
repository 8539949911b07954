import os
from typing import Any


def expand_tilde_str(value: str) -> str:
    """Expand a leading '~' to the user home directory, leaving other strings untouched."""
    return os.path.expanduser(value) if value.startswith("~") else value


def expand_tilde(obj: Any) -> Any:
    """Recursively expand leading '~' in every string of a nested dict/list/tuple/set structure."""
    if isinstance(obj, str):
        return expand_tilde_str(obj)
    if isinstance(obj, dict):
        return {k: expand_tilde(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        t = type(obj)
        return t(expand_tilde(v) for v in obj)
    return obj
