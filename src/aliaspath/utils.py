import logging

logger = logging.getLogger(__name__)


# --- Custom Logging Filter ---
# Resolver log calls pass the alias through `extra={"alias": ...}`. Records from
# anywhere else (root logger, third-party libraries) lack it, so the filter
# fills in a placeholder before the formatter sees the record.
class AliasLogFilter(logging.Filter):
    """Gives every record an 'alias' attribute ('-' when the caller set none)."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "alias", None) is None:
            record.alias = "-"
        return True


def init_logging(level: int = logging.INFO, clear_existing_handlers: bool = True) -> None:
    """
    Sets up console logging for applications embedding aliaspath.

    Args:
        level: The desired logging level for the root logger (e.g., logging.INFO, logging.DEBUG).
        clear_existing_handlers: If True, removes any handlers already attached to the
                                 root logger, so re-running setup does not duplicate output.
    """
    root_logger = logging.getLogger()

    if clear_existing_handlers:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()

    stream_handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(name)s] [%(alias)s] %(message)s"
    )
    stream_handler.setFormatter(formatter)
    stream_handler.addFilter(AliasLogFilter())

    root_logger.addHandler(stream_handler)
    root_logger.setLevel(level)

    logger.debug(
        f"Logging setup complete. Root logger level set to {logging.getLevelName(level)}."
    )
