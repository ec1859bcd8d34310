"""YAML-backed message catalogs implementing the Translator port."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from admin_console.application.interfaces import Translator

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parents[2] / "locales"
FALLBACK_LOCALE = "en"


class _KeepMissing(dict):
    """format_map helper — unknown placeholders stay verbatim."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def _flatten(tree: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in tree.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, f"{dotted}."))
        elif value is not None:
            flat[dotted] = str(value)
    return flat


def load_catalog(locale: str, locales_dir: Path = LOCALES_DIR) -> dict[str, str]:
    """Load ``<locale>.yaml`` as a flat ``{dotted.key: text}`` mapping."""
    path = locales_dir / f"{locale}.yaml"
    if not path.exists():
        logger.warning("No message catalog for locale '%s' at %s", locale, path)
        return {}
    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    return _flatten(data)


class CatalogTranslator(Translator):
    """Resolves dotted keys in the active locale, then English, then the key itself."""

    def __init__(
        self,
        locale: str = FALLBACK_LOCALE,
        *,
        catalogs: Mapping[str, Mapping[str, str]] | None = None,
        locales_dir: Path = LOCALES_DIR,
    ):
        self._locale = locale
        if catalogs is not None:
            self._catalog = dict(catalogs.get(locale, {}))
            self._fallback = dict(catalogs.get(FALLBACK_LOCALE, {}))
        else:
            self._catalog = load_catalog(locale, locales_dir)
            self._fallback = (
                self._catalog
                if locale == FALLBACK_LOCALE
                else load_catalog(FALLBACK_LOCALE, locales_dir)
            )

    @property
    def locale(self) -> str:
        return self._locale

    def translate(self, key: str, params: Mapping[str, Any] | None = None) -> str:
        template = self._catalog.get(key) or self._fallback.get(key)
        if template is None:
            logger.debug("Missing translation for '%s' (%s)", key, self._locale)
            template = key
        if not params:
            return template
        return template.format_map(_KeepMissing({k: "" if v is None else v for k, v in params.items()}))
