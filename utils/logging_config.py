# utils/logging_config.py
# Wires the screen loggers to a console handler using the saved log level.

import logging

SCREEN_LOGGERS = ("screens", "services", "components")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings, handler=None):
    """
    Applies the ``log_level`` setting to the application loggers.

    Unknown level names fall back to WARNING. A ``StreamHandler`` is added
    unless ``handler`` is given; calling this twice does not add a second
    handler of the same kind.

    Returns:
        int: The numeric level that was applied.
    """
    level_name = str(settings.get_value("log_level") or "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)

    for name in SCREEN_LOGGERS:
        log = logging.getLogger(name)
        log.setLevel(level)
        if not any(type(h) is type(handler) for h in log.handlers):
            log.addHandler(handler)
    return level
