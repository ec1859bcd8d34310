"""Unit tests for the YAML catalog translator."""

from admin_console.infrastructure.translation import CatalogTranslator


def test_english_catalog_formats_params():
    translator = CatalogTranslator("en")
    assert translator.translate("notifications.created", {"entity": "Client"}) == "Client created"
    assert translator.translate("clients.confirmDelete", {"name": "Anna"}) == "Delete client Anna?"


def test_russian_catalog_loaded():
    translator = CatalogTranslator("ru")
    assert translator.locale == "ru"
    assert translator.translate("entities.client") != "Client"


def test_missing_key_in_locale_falls_back_to_english():
    translator = CatalogTranslator(
        "ru",
        catalogs={"en": {"validation.invalid": "{field} is invalid"}, "ru": {}},
    )
    assert translator.translate("validation.invalid", {"field": "name"}) == "name is invalid"


def test_unknown_key_returns_key():
    translator = CatalogTranslator("en")
    assert translator.translate("no.such.key") == "no.such.key"


def test_unknown_placeholder_is_kept():
    translator = CatalogTranslator("en", catalogs={"en": {"greeting": "Hi {name}, {missing}"}})
    assert translator.translate("greeting", {"name": "Anna"}) == "Hi Anna, {missing}"


def test_unknown_locale_uses_english(tmp_path):
    (tmp_path / "en.yaml").write_text("entities:\n  client: Client\n", encoding="utf-8")
    translator = CatalogTranslator("de", locales_dir=tmp_path)
    assert translator.translate("entities.client") == "Client"
