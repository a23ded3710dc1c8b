"""Configuration for hostspec."""

from hostspec.config.settings import Settings

__all__ = ["Settings"]
