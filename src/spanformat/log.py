"""
Optional logging setup for applications using spanformat. The library itself only
emits records on the `spanformat` logger. File logs go to the platform's default
location unless `config.init_dev_mode` was called:

- linux: $HOME/.local/state/spanformat/log
- macOS: $HOME/Library/Logs/spanformat

"""

import logging
from logging.handlers import TimedRotatingFileHandler

from spanformat import config

logger = logging.getLogger('spanformat')

formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

_file_handler = None


def log_namer(log_name):
    return log_name.replace(".log", "") + ".log"


def get_file_handler():
    global _file_handler
    if _file_handler is None:
        fh = TimedRotatingFileHandler(config.get_log_dir() / 'spanformat.log', when='d', interval=1, backupCount=5)
        fh.namer = log_namer
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        _file_handler = fh
    return _file_handler


def init_logger(background=False):
    logger.setLevel(logging.DEBUG)
    logging.getLogger('PyQt6').setLevel(logging.INFO)

    if background:
        toggle_file_logging(True)
    else:  # log to console, when running in foreground
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)
        ch.setFormatter(formatter)
        logger.addHandler(ch)


def toggle_file_logging(should_log_to_file):
    """
    Enables file logging according to the input
    """

    if should_log_to_file:
        logger.addHandler(get_file_handler())
    elif _file_handler is not None:
        logger.removeHandler(_file_handler)
