"""Configuration store exceptions."""


class ConfigStoreError(Exception):
    """Base class for all errors raised by the configuration store."""

    pass


class ParseError(ConfigStoreError, ValueError):
    """Exception raised when a configuration document is not a valid JSON object."""

    pass


class ConfigIOError(ConfigStoreError, OSError):
    """Exception raised when a configuration file cannot be read or written."""

    pass


class SerializationError(ConfigStoreError, ValueError):
    """Exception raised when a configuration holds a value that cannot be written as JSON."""

    pass


class TypeMismatch(ConfigStoreError, TypeError):
    """Exception raised when a stored value cannot be coerced to the requested type."""

    pass


class NoSuchKey(ConfigStoreError, KeyError):
    """Exception raised when a key is not present in the configuration."""

    def __init__(self, key: str):
        super().__init__(f"No such key: {key}")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise render the message quoted
        return self.args[0]


class RequiredSettingError(ConfigStoreError):
    """Exception raised when a mandatory configuration parameter is missing or invalid."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key
