from tripbuilder.shared.exceptions import CatalogError

__all__ = ["CatalogError"]
