"""Runtime configuration helpers."""

from tripbuilder.config.settings import AppSettings, resolve_settings

__all__ = ["AppSettings", "resolve_settings"]
