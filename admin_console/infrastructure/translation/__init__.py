"""Translation infrastructure package."""

from .catalog_translator import CatalogTranslator, load_catalog

__all__ = ["CatalogTranslator", "load_catalog"]
