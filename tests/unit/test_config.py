import spanformat.config
from PyQt6.QtCore import QLocale
from spanformat.i18n import get_locale, resolve_locale


def test_init_dev_mode(tmp_path, monkeypatch):
    monkeypatch.setattr(spanformat.config, 'LOG_DIR', None)
    spanformat.config.init_dev_mode(tmp_path)

    assert spanformat.config.LOG_DIR == tmp_path.resolve() / 'logs'
    assert spanformat.config.LOG_DIR.is_dir()
    assert spanformat.config.get_log_dir() == spanformat.config.LOG_DIR


def test_get_log_dir_uses_platformdirs(tmp_path, monkeypatch, mocker):
    monkeypatch.setattr(spanformat.config, 'LOG_DIR', None)
    dirs = mocker.patch('platformdirs.PlatformDirs')
    dirs.return_value.user_log_path = tmp_path / 'platform-logs'

    assert spanformat.config.get_log_dir() == tmp_path / 'platform-logs'
    dirs.assert_called_once_with('spanformat', 'spanformat')
    assert (tmp_path / 'platform-logs').is_dir()


def test_ambient_locale(locale_name):
    locale_name('de_DE')
    assert get_locale().decimalPoint() == ','

    locale_name('')
    assert get_locale().name() == QLocale().name()


def test_resolve_locale():
    german = QLocale('de_DE')
    assert resolve_locale(None) is None
    assert resolve_locale(german) is german
    assert resolve_locale('de_DE').name() == 'de_DE'
