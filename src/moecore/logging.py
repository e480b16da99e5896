"""Public logging helpers (re-exported from moecore.foundation.logging)."""

from __future__ import annotations

from .foundation.logging import configure_moecore_logging

__all__ = ["configure_moecore_logging"]
