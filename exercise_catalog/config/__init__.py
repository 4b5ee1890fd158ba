"""Exercise Catalog 설정"""

from .settings import CatalogSettings, settings

__all__ = ["CatalogSettings", "settings"]
