"""
locale support for the plain-text conversions
"""
import logging
from typing import Optional, Union

from PyQt6.QtCore import QLocale

from spanformat import config

logger = logging.getLogger(__name__)

LocaleLike = Union[QLocale, str, None]


def get_locale() -> QLocale:
    """
    The ambient locale: the one named in SPANFORMAT_LOCALE if set, Qt's default locale otherwise.
    """
    if config.LOCALE_NAME:
        return resolve_locale(config.LOCALE_NAME)
    return QLocale()


def resolve_locale(locale: LocaleLike) -> Optional[QLocale]:
    """
    Turns a locale name like 'de_DE' into a QLocale. None stays None and means no localization.
    """
    if locale is None or isinstance(locale, QLocale):
        return locale
    resolved = QLocale(locale)
    if resolved.language() == QLocale.Language.C and locale not in ('C', 'POSIX'):
        logger.warning('Unknown locale %r, using the C locale instead.', locale)
    return resolved
