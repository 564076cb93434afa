"""LegacyBridge - resilience layer in front of a legacy JSON API."""

__version__ = "1.0.0"
