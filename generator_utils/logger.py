import threading
import os
import sys
import logging
from typing import Optional

_lock = threading.Lock()
_loggerhandlers = {}

DEFAULT_NAME = "GeneratorUtils"
LOG_LEVEL_ENV = "GENERATOR_UTILS_LOG_LEVEL"
LOG_OUTPUT_ENV = "GENERATOR_UTILS_LOG_OUTPUT"
FALLBACK_LEVEL = logging.WARNING


class LogFormatter(logging.Formatter):
    DEBUG_COLOR = "\033[1;30m"  # dark gray
    ALERT_COLOR = "\033[38;5;11m"  # yellow
    RESET_CODE = "\033[0m"

    def __init__(self, color, *args, **kwargs):
        super(LogFormatter, self).__init__(*args, **kwargs)
        self.color = color

    def format(self, record, *args, **kwargs):
        record.color_on, record.color_off = "", ""
        if self.color:
            record.color_on = self.DEBUG_COLOR if record.levelno <= logging.DEBUG else self.ALERT_COLOR
            record.color_off = self.RESET_CODE
        return super(LogFormatter, self).format(record, *args, **kwargs)


def resolve_level(value):
    """
    Maps a level name from the environment to a logging level
    :param value: level name such as "debug", or None when unset
    :return: int level, None when value is None, FALLBACK_LEVEL when the name is unknown
    """
    if value is None:
        return None
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        return FALLBACK_LEVEL
    return level


class SequenceLogger:
    """
    Debug logger for the combinators. Unless a level is requested through the environment the
    named logger is left unconfigured and its records propagate to whatever handlers the
    application installs. Requesting a level attaches a console handler of its own.
    """
    def __init__(self, config):
        self.config = config
        self.logger = self.setup_logging()

    def setup_logging(self):
        logger = logging.getLogger(self.config["name"])
        level = self.config["console_log_level"]
        if level is None:
            return logger

        if self.config["console_log_output"] == "stdout":
            console_log_output = sys.stdout
        else:
            console_log_output = sys.stderr

        logger.setLevel(level)
        console_handler = logging.StreamHandler(console_log_output)
        console_handler.setLevel(level)
        console_handler.setFormatter(LogFormatter(fmt=self.config["log_line_template"], color=self.config["console_log_color"]))
        if logger.hasHandlers():
            logger.handlers.clear()
        logger.addHandler(console_handler)
        logger.propagate = False
        return logger

    def d(self, *args, **kwargs):
        return self.logger.debug(*args, **kwargs)


def _setup_library_root_logger(name):
    logger_config = {
        'name': name,
        'console_log_output': os.environ.get(LOG_OUTPUT_ENV, "stderr"),
        'console_log_level': resolve_level(os.environ.get(LOG_LEVEL_ENV)),
        'console_log_color': True,
        'log_line_template': f"%(color_on)s[{name}] %(funcName)-5s%(color_off)s: %(message)s"
    }
    return SequenceLogger(logger_config)


def _configure_library_root_logger(name=DEFAULT_NAME) -> None:
    with _lock:
        if name in _loggerhandlers:
            return
        _loggerhandlers[name] = _setup_library_root_logger(name)


def get_logger(name: Optional[str] = DEFAULT_NAME) -> SequenceLogger:
    if name is None:
        name = DEFAULT_NAME
    _configure_library_root_logger(name)
    return _loggerhandlers[name]
