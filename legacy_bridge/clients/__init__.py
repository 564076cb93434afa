"""Clients package - outbound integrations."""
from .upstream import UpstreamClient

__all__ = ["UpstreamClient"]
