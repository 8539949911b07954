"""
Sample: structured logging for confstore.

- Enables structlog for a named logger and binds a service field
- Binds request-scoped context using structlog.contextvars
- Logs are written to CONFSTORE_DIR_PATHS.STRUCT_LOGGER_DIR under modules/{logger_name}.log as JSON

The same switch is available without code changes: ``CONFSTORE_LOGGER__USE_STRUCTLOG=true``.
"""

import structlog

from confstore import ConfigStore
from confstore.logging import get_logger

logger = get_logger("samples.loader", use_structlog=True, add_file_handler=True, structlog_bind={"service": "sample"})

structlog.contextvars.bind_contextvars(request_id="abc123")

config = ConfigStore.loads(b'{"port": 8080}')
logger.info("configuration loaded", keys=sorted(config))
logger.info("port is %s", config.get_int64("port"))
