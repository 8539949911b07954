"""Fail-fast adapter for application entry points.

Library-mode stores raise `RequiredSettingError` instead of terminating the process. Wrapping the outermost entry
point with `exit_on_config_error` restores the "missing mandatory setting aborts startup" behaviour::

    from confstore import ConfigStore, exit_on_config_error

    @exit_on_config_error()
    def main():
        config = ConfigStore.load("service.json")
        port = config.get_required_uint64("port")
        ...
"""

import sys
from contextlib import contextmanager

from confstore.exceptions import ConfigStoreError, RequiredSettingError
from confstore.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def exit_on_config_error(exit_code: int = 1):
    """Log configuration errors raised in the wrapped block and exit with `exit_code`.

    Usable as a context manager or as a decorator. Exceptions other than `ConfigStoreError` propagate unchanged.
    """
    try:
        yield
    except RequiredSettingError as e:
        logger.error(str(e))
        sys.exit(exit_code)
    except ConfigStoreError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(exit_code)
