import os
from pathlib import Path

import platformdirs

APP_NAME = 'spanformat'
APP_AUTHOR = 'spanformat'
LOG_DIR = None

# Ambient locale for `spanformat.format`, e.g. 'de_DE'. Empty means Qt's default locale.
LOCALE_NAME = os.environ.get('SPANFORMAT_LOCALE', '')
DEFAULT_LINK_COLOR = os.environ.get('SPANFORMAT_LINK_COLOR', '#0984e3')


def default_dev_dir() -> Path:
    """Returns a default dir for log files in the project's main folder"""
    return Path(__file__).parent.parent.parent / '.dev_config'


def init_from_platformdirs():
    """Initializes the log dir for system-wide use"""
    dirs = platformdirs.PlatformDirs(APP_NAME, APP_AUTHOR)
    init(dirs.user_log_path)


def init_dev_mode(dir: Path):
    """Initializes the log dir for local use inside provided dir"""
    dir_full_path = Path(dir).resolve()
    init(dir_full_path / 'logs')


def init(logs: Path):
    """Initializes config directories with provided paths"""
    global LOG_DIR
    LOG_DIR = logs
    ensure_dirs()


def ensure_dirs():
    """Creates config dirs and parent dirs if they don't exist"""
    LOG_DIR.mkdir(parents=True, exist_ok=True)


def get_log_dir() -> Path:
    if LOG_DIR is None:
        init_from_platformdirs()
    return LOG_DIR
