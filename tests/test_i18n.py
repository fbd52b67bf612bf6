"""Tests for the i18n module."""

import pytest

import i18n as i18n_mod
from i18n import (
    classification_name,
    get_available_locales,
    get_locale,
    kind_name,
    set_locale,
    t,
)
from i18n.en_US import STRINGS as EN
from i18n.zh_CN import STRINGS as ZH


@pytest.fixture(autouse=True)
def _reset_locale():
    """Reset locale after each test."""
    original = get_locale()
    yield
    set_locale(original)


class TestSetLocale:
    def test_switch_to_en(self):
        set_locale("en_US")
        assert get_locale() == "en_US"

    def test_invalid_locale(self):
        with pytest.raises(ValueError, match="Unsupported locale"):
            set_locale("ja_JP")

    def test_available_locales(self):
        locales = get_available_locales()
        assert "zh_CN" in locales
        assert "en_US" in locales


class TestTranslation:
    def test_basic_key_zh(self):
        set_locale("zh_CN")
        assert t("game.stalemate") == "平局！"

    def test_basic_key_en(self):
        set_locale("en_US")
        assert t("game.stalemate") == "Stalemate!"

    def test_format_params(self):
        set_locale("en_US")
        assert t("game.winner", name="Sheriff") == "Sheriff wins!"

    def test_missing_param_returns_template(self):
        set_locale("en_US")
        assert t("game.winner") == "{name} wins!"

    def test_missing_key(self):
        assert t("no.such.key") == "[no.such.key]"

    def test_alias(self):
        assert i18n_mod._ is t

    def test_fallback_to_zh(self, monkeypatch):
        set_locale("zh_CN")
        monkeypatch.setitem(i18n_mod._tables["zh_CN"], "only.zh", "仅中文")
        set_locale("en_US")
        assert t("only.zh") == "仅中文"


class TestDomainHelpers:
    def test_kind_name(self):
        set_locale("en_US")
        assert kind_name("pseudo_duck") == "Pseudo Duck"
        set_locale("zh_CN")
        assert kind_name("nemo") == "尼莫"

    def test_unknown_kind_name_returns_id(self):
        assert kind_name("cat") == "cat"

    def test_classification_name(self):
        set_locale("en_US")
        assert classification_name("duck_dog") == "Duck-Dog"
        assert classification_name("weird") == "weird"


class TestTableConsistency:
    def test_same_keys(self):
        assert set(EN) == set(ZH)

    def test_same_placeholders(self):
        import string

        formatter = string.Formatter()
        for key in EN:
            en_fields = {f for _, f, _, _ in formatter.parse(EN[key]) if f}
            zh_fields = {f for _, f, _, _ in formatter.parse(ZH[key]) if f}
            assert en_fields == zh_fields, key
