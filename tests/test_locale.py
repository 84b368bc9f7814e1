import pytest

from hessiankit.locale import (
    Locale,
    LocaleEnum,
    LocaleHandle,
    locale_from_handle,
    to_locale,
)


def test_us_string_form():
    assert str(to_locale(LocaleEnum.US)) == "en_US"


def test_language_only_string_form():
    assert str(to_locale(LocaleEnum.ENGLISH)) == "en"


def test_root_is_empty():
    root = to_locale(LocaleEnum.ROOT)
    assert str(root) == ""
    assert root.lang == "" and root.country == ""


def test_aliases_are_the_same_locale():
    assert to_locale(LocaleEnum.CHINA) is to_locale(LocaleEnum.SIMPLIFIED_CHINESE)
    assert to_locale(LocaleEnum.PRC) is to_locale(LocaleEnum.SIMPLIFIED_CHINESE)
    assert to_locale(LocaleEnum.TAIWAN) is to_locale(LocaleEnum.TRADITIONAL_CHINESE)
    assert to_locale(LocaleEnum.CHINA).id == LocaleEnum.SIMPLIFIED_CHINESE


def test_italy_keeps_lowercase_country():
    italy = to_locale(LocaleEnum.ITALY)
    assert italy.lang == "it"
    assert italy.country == "it"


def test_to_locale_accepts_int():
    assert to_locale(18) == to_locale(LocaleEnum.US)


@pytest.mark.parametrize("member", list(LocaleEnum))
def test_handle_round_trip(member):
    locale = to_locale(member)
    assert locale_from_handle(LocaleHandle(str(locale))) == locale


def test_handle_lookup_specific():
    handle = LocaleHandle("de_DE")
    assert locale_from_handle(handle) == to_locale(LocaleEnum.GERMANY)


def test_unknown_handle_raises():
    with pytest.raises(KeyError):
        locale_from_handle(LocaleHandle("xx_YY"))


def test_locale_is_immutable():
    locale = to_locale(LocaleEnum.UK)
    with pytest.raises(AttributeError):
        locale.lang = "fr"
    assert to_locale(LocaleEnum.UK).lang == "en"
    assert str(to_locale(LocaleEnum.UK)) == "en_GB"


def test_locale_handle_class_name():
    assert LocaleHandle.java_class_name == "com.alibaba.com.caucho.hessian.io.LocaleHandle"
    assert LocaleHandle().value == ""


def test_locale_equality_includes_id():
    assert Locale(LocaleEnum.UK, "en", "GB") == to_locale(LocaleEnum.UK)
    assert Locale(LocaleEnum.US, "en", "GB") != to_locale(LocaleEnum.UK)