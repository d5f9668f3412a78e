"""Logging setup - one stream handler on the root logger."""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: str = "INFO"):
    """Configure the root logger (called on app startup, safe to call again)."""
    root = logging.getLogger()
    handler = next((h for h in root.handlers if getattr(h, "_ab_tester", False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler._ab_tester = True
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
