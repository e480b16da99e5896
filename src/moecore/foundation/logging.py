from __future__ import annotations

import logging


def configure_moecore_logging(*, level: int = logging.INFO) -> None:
    """
    Configure a minimal console logger for moecore.

    Notes:
        - This is opt-in (library code must not call logging.basicConfig()).
        - The handler is only attached if neither the root logger nor the "moecore" logger has handlers.
    """
    root = logging.getLogger()
    moecore_logger = logging.getLogger("moecore")

    # If the user already configured logging, don't interfere.
    if root.handlers or moecore_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    moecore_logger.addHandler(handler)
    moecore_logger.setLevel(level)
    moecore_logger.propagate = False


__all__ = ["configure_moecore_logging"]
