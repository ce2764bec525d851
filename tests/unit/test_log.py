import logging
import os
import time
from logging.handlers import TimedRotatingFileHandler

import spanformat.log
from spanformat.log import log_namer, toggle_file_logging


def test_log_namer(tmp_path):
    """Tests log_namer to ensure adding '.log' to end of filename did not break
    rotating and deleting backups"""
    log_dir = tmp_path / 'logs'
    log_dir.mkdir()

    # 'when' and 'backupCount' set to speed up test execution time
    handler = TimedRotatingFileHandler(os.path.join(log_dir, 'spanformat.log'), when='s', interval=1, backupCount=2)
    handler.namer = log_namer

    for i in range(handler.backupCount + 2):
        handler.doRollover()
        files = os.listdir(log_dir)
        assert len(files) == min(i + 2, handler.backupCount + 1)
        for file in files:
            assert file.endswith('.log')
        time.sleep(1)  # Need 1s between logs or they are overwritten
    handler.close()


def test_toggle_file_logging(log_dir, monkeypatch):
    monkeypatch.setattr(spanformat.log, '_file_handler', None)
    logger = logging.getLogger('spanformat')

    toggle_file_logging(True)
    handler = spanformat.log._file_handler
    try:
        assert handler in logger.handlers
        assert handler.baseFilename == str(log_dir / 'spanformat.log')
    finally:
        toggle_file_logging(False)
        handler.close()
    assert handler not in logger.handlers


def test_init_logger_foreground(monkeypatch):
    logger = logging.getLogger('spanformat')
    monkeypatch.setattr(logger, 'handlers', [])
    monkeypatch.setattr(logger, 'level', logging.NOTSET)

    spanformat.log.init_logger()

    assert logger.level == logging.DEBUG
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
