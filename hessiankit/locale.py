"""java.util.Locale constants and the LocaleHandle that carries them on the wire."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Dict, Mapping


class LocaleEnum(enum.IntEnum):
    """The static ``java.util.Locale`` constants, in declaration order."""

    ENGLISH = 0
    FRENCH = enum.auto()
    GERMAN = enum.auto()
    ITALIAN = enum.auto()
    JAPANESE = enum.auto()
    KOREAN = enum.auto()
    CHINESE = enum.auto()
    SIMPLIFIED_CHINESE = enum.auto()
    TRADITIONAL_CHINESE = enum.auto()
    FRANCE = enum.auto()
    GERMANY = enum.auto()
    ITALY = enum.auto()
    JAPAN = enum.auto()
    KOREA = enum.auto()
    CHINA = enum.auto()
    PRC = enum.auto()
    TAIWAN = enum.auto()
    UK = enum.auto()
    US = enum.auto()
    CANADA = enum.auto()
    CANADA_FRENCH = enum.auto()
    ROOT = enum.auto()


@dataclass(frozen=True)
class Locale:
    """A language with an optional country, as ``java.util.Locale``."""

    id: LocaleEnum
    lang: str = ""
    country: str = ""

    def __str__(self) -> str:
        if self.country:
            return f"{self.lang}_{self.country}"
        return self.lang


@dataclass
class LocaleHandle:
    """The serialised form of a locale: its string representation."""

    java_class_name: ClassVar[str] = "com.alibaba.com.caucho.hessian.io.LocaleHandle"

    value: str = ""


def _build_locales() -> Dict[LocaleEnum, Locale]:
    e = LocaleEnum
    table = {
        e.ENGLISH: Locale(e.ENGLISH, "en"),
        e.FRENCH: Locale(e.FRENCH, "fr"),
        e.GERMAN: Locale(e.GERMAN, "de"),
        e.ITALIAN: Locale(e.ITALIAN, "it"),
        e.JAPANESE: Locale(e.JAPANESE, "ja"),
        e.KOREAN: Locale(e.KOREAN, "ko"),
        e.CHINESE: Locale(e.CHINESE, "zh"),
        e.SIMPLIFIED_CHINESE: Locale(e.SIMPLIFIED_CHINESE, "zh", "CN"),
        e.TRADITIONAL_CHINESE: Locale(e.TRADITIONAL_CHINESE, "zh", "TW"),
        e.FRANCE: Locale(e.FRANCE, "fr", "FR"),
        e.GERMANY: Locale(e.GERMANY, "de", "DE"),
        e.ITALY: Locale(e.ITALY, "it", "it"),
        e.JAPAN: Locale(e.JAPAN, "ja", "JP"),
        e.KOREA: Locale(e.KOREA, "ko", "KR"),
    }
    # Aliases share the very same locale as the constant they stand for.
    table[e.CHINA] = table[e.SIMPLIFIED_CHINESE]
    table[e.PRC] = table[e.SIMPLIFIED_CHINESE]
    table[e.TAIWAN] = table[e.TRADITIONAL_CHINESE]
    table.update(
        {
            e.UK: Locale(e.UK, "en", "GB"),
            e.US: Locale(e.US, "en", "US"),
            e.CANADA: Locale(e.CANADA, "en", "CA"),
            e.CANADA_FRENCH: Locale(e.CANADA_FRENCH, "fr", "CA"),
            e.ROOT: Locale(e.ROOT),
        }
    )
    return {member: table[member] for member in LocaleEnum}


_LOCALES: Mapping[LocaleEnum, Locale] = MappingProxyType(_build_locales())
_BY_STRING: Mapping[str, Locale] = MappingProxyType(
    {str(locale): locale for locale in _LOCALES.values()}
)


def to_locale(e: LocaleEnum) -> Locale:
    """Return the locale for a ``LocaleEnum`` constant."""
    return _LOCALES[LocaleEnum(e)]


def locale_from_handle(handle: LocaleHandle) -> Locale:
    """Return the known locale whose string form is the handle's value.

    Raises ``KeyError`` when the value names no known locale.
    """
    return _BY_STRING[handle.value]