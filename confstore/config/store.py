import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, TypeVar, Union

from confstore.base import ConfStoreBase
from confstore.config.values import ValueKind, is_kind, kind_of, mismatch, to_int64, to_slice, to_string, to_uint64
from confstore.exceptions import (
    ConfigIOError,
    NoSuchKey,
    ParseError,
    RequiredSettingError,
    SerializationError,
    TypeMismatch,
)

T = TypeVar("T")

Value = Union[None, bool, int, float, str, List["Value"], "ConfigStore"]

_MISSING = object()


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a valid JSON number")


class ConfigStore(ConfStoreBase, dict):
    """
    Configuration container backed by a JSON document.

    A `ConfigStore` is a `dict` from string keys to configuration values (null, bool, number, string, list or a
    nested `ConfigStore`). Nested JSON objects are parsed straight into `ConfigStore` instances, so sub-configs
    expose the same typed accessors as the top level.

    Accessors come in two flavours:

    - optional (`get`, `get_string`, `get_int64`, ...) raise `NoSuchKey` or `TypeMismatch` to the caller.
    - required (`get_required`, `get_required_string`, ...) treat any failure as fatal. With ``fail_fast=True`` the
      failure is logged and the process exits with status 1; otherwise `RequiredSettingError` is raised and can be
      turned into an exit at the application entry point with `confstore.exit_on_config_error`.

    Args:
        mapping: Initial entries. Nested plain dicts are converted to `ConfigStore`.
        fail_fast: Whether required accessors terminate the process on failure.

    Example:
        >>> from confstore import ConfigStore
        >>> config = ConfigStore.loads(b'{"port": 8080, "db": {"host": "localhost"}}')
        >>> config.get_int64("port")
        8080
        >>> config.get_sub_config("db").get_string("host")
        'localhost'
    """

    def __init__(self, mapping: Optional[Mapping[str, Any]] = None, *, fail_fast: bool = False):
        super().__init__()
        for key, value in (mapping or {}).items():
            self[key] = self._adopt(value)
        self.fail_fast = fail_fast

    @classmethod
    def _adopt(cls, value: Any) -> Any:
        if isinstance(value, dict) and not isinstance(value, ConfigStore):
            return cls(value)
        if isinstance(value, list):
            return [cls._adopt(item) for item in value]
        return value

    @property
    def fail_fast(self) -> bool:
        """Whether required accessors terminate the process on failure.

        The mode is shared by the whole tree: assigning it also updates every nested `ConfigStore`, including those
        inside lists.
        """
        return self._fail_fast

    @fail_fast.setter
    def fail_fast(self, value: bool) -> None:
        self._fail_fast = value
        self._share_fail_fast(self.values())

    def _share_fail_fast(self, values: Iterable[Any]) -> None:
        pending = list(values)
        while pending:
            item = pending.pop()
            if isinstance(item, ConfigStore):
                # a nested store already in this mode holds a subtree in this mode
                if item._fail_fast != self._fail_fast:
                    item._fail_fast = self._fail_fast
                    pending.extend(item.values())
            elif isinstance(item, list):
                pending.extend(item)

    # ------------------------------------------------------------------
    # Loading and serialization

    @classmethod
    def loads(cls, data: Union[bytes, str], *, fail_fast: bool = False) -> "ConfigStore":
        """Parse a JSON document whose top level is an object.

        Raises:
            ParseError: If the data is not valid UTF-8 JSON or the top level is not an object.
        """
        try:
            document = json.loads(data, object_hook=cls, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            raise ParseError(f"Invalid configuration document: {exc}") from exc
        if not isinstance(document, cls):
            raise ParseError(f"Configuration document must be a JSON object, got {kind_of(document).value}")
        document.fail_fast = fail_fast
        return document

    @classmethod
    def load(cls, path: Union[str, Path], *, fail_fast: bool = False) -> "ConfigStore":
        """Read a JSON configuration file and parse it with `loads`.

        Raises:
            ConfigIOError: If the file cannot be read.
            ParseError: If the file content is not a JSON object.
        """
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise ConfigIOError(f"Unable to read configuration file {path}: {exc}") from exc
        cls.logger.debug(f"Read {len(data)} bytes of configuration from {path}")
        return cls.loads(data, fail_fast=fail_fast)

    def dumps(self, *, indent: Optional[int] = None) -> bytes:
        """Serialize to UTF-8 encoded JSON.

        Non-ASCII text is written as is. Strings holding lone surrogates, which UTF-8 cannot encode, switch the whole
        document to ``\\uXXXX`` escapes.

        Raises:
            SerializationError: If a value cannot be represented in JSON.
        """
        try:
            text = json.dumps(self, indent=indent, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError, RecursionError) as exc:
            raise SerializationError(f"Configuration cannot be serialized: {exc}") from exc
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError:
            return json.dumps(self, indent=indent, allow_nan=False).encode("ascii")

    def dump(self, path: Union[str, Path], *, indent: int = 4) -> None:
        """Write the configuration to a JSON file."""
        data = self.dumps(indent=indent)
        try:
            Path(path).write_bytes(data)
        except OSError as exc:
            raise ConfigIOError(f"Unable to write configuration file {path}: {exc}") from exc

    def debug(self) -> None:
        """Log every entry at DEBUG level."""
        for key, value in self.items():
            self.logger.debug(f"config[{key}] = {value!r}")

    # ------------------------------------------------------------------
    # Optional accessors

    def get(self, key: str, default: Any = _MISSING) -> Value:
        """Return the value stored under key, unmodified.

        Unlike `dict.get`, a missing key raises unless a default is given.

        Raises:
            NoSuchKey: If the key is absent and no default was given.
        """
        try:
            return self[key]
        except KeyError:
            if default is not _MISSING:
                return default
            raise NoSuchKey(key) from None

    def get_string(self, key: str) -> str:
        return to_string(self.get(key), key)

    def get_int64(self, key: str) -> int:
        return to_int64(self.get(key), key)

    def get_uint64(self, key: str) -> int:
        return to_uint64(self.get(key), key)

    def get_string_slice(self, key: str) -> List[str]:
        return to_slice(self.get(key), key, to_string)

    def get_int64_slice(self, key: str) -> List[int]:
        return to_slice(self.get(key), key, to_int64)

    def get_uint64_slice(self, key: str) -> List[int]:
        return to_slice(self.get(key), key, to_uint64)

    def get_sub_config(self, key: str) -> "ConfigStore":
        """Return the nested mapping stored under key as a `ConfigStore`.

        Nested stores are returned as-is, so changes made through the sub-config are visible from the parent. A
        plain mapping assigned with ``config[key] = ...`` is wrapped in a new `ConfigStore` that replaces it in the
        parent.
        """
        value = self.get(key)
        if not is_kind(value, ValueKind.MAPPING):
            raise mismatch(key, "mapping", value)
        if not isinstance(value, ConfigStore):
            value = type(self)(value, fail_fast=self.fail_fast)
            self[key] = value
        return value

    # ------------------------------------------------------------------
    # Required accessors

    def _require(self, key: str, accessor: Callable[[str], T]) -> T:
        try:
            return accessor(key)
        except NoSuchKey as exc:
            message, cause = f"Configuration parameter {key} is mandatory", exc
        except TypeMismatch as exc:
            message, cause = f"Configuration parameter {key} is invalid: {exc}", exc
        if self.fail_fast:
            self.logger.error(message)
            sys.exit(1)
        raise RequiredSettingError(key, message) from cause

    def get_required(self, key: str) -> Value:
        return self._require(key, self.get)

    def get_required_string(self, key: str) -> str:
        return self._require(key, self.get_string)

    def get_required_int64(self, key: str) -> int:
        return self._require(key, self.get_int64)

    def get_required_uint64(self, key: str) -> int:
        return self._require(key, self.get_uint64)

    def get_required_string_slice(self, key: str) -> List[str]:
        return self._require(key, self.get_string_slice)

    def get_required_int64_slice(self, key: str) -> List[int]:
        return self._require(key, self.get_int64_slice)

    def get_required_uint64_slice(self, key: str) -> List[int]:
        return self._require(key, self.get_uint64_slice)

    def get_required_sub_config(self, key: str) -> "ConfigStore":
        return self._require(key, self.get_sub_config)

    # ------------------------------------------------------------------
    # Mutation

    def set(self, key: str, value: Any) -> None:
        """Insert or overwrite an entry.

        The value is not validated. Plain dicts, also inside lists, are converted to `ConfigStore` and join this
        store's `fail_fast` mode.
        """
        value = self._adopt(value)
        self[key] = value
        self._share_fail_fast([value])

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy as plain dicts and lists."""
        return json.loads(self.dumps())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"
