import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _configured

    resolved = (level or settings.LOG_LEVEL or "INFO").strip().upper()
    root = logging.getLogger()
    root.setLevel(logging.getLevelNamesMapping().get(resolved, logging.INFO))

    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True
