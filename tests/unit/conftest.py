import pytest
import spanformat.config


def pytest_configure(config):
    spanformat.config.LOCALE_NAME = 'en_US'  # Ensure numbers and dates are tested in English


@pytest.fixture
def locale_name(monkeypatch):
    def set_locale(name):
        monkeypatch.setattr(spanformat.config, 'LOCALE_NAME', name)

    return set_locale


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(spanformat.config, 'LOG_DIR', None)
    spanformat.config.init_dev_mode(tmp_path)
    return spanformat.config.LOG_DIR
