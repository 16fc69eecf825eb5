"""Shared (non-domain) exceptions."""


class CatalogError(Exception):
    """Catalog data could not be loaded or a record was not found."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"[{source}] {message}")
