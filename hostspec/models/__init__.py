"""Data models for hostspec."""

from hostspec.models.host import Host

__all__ = ["Host"]
