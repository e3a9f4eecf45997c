"""Configuration, match-status tracking and reply matching for a soccer simulator sidecar."""

__version__ = "0.1.0"

__all__ = ["config", "resolver", "sections", "status"]