# despensa/utils/logging.py
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def configure_logging(level=logging.INFO):
    """Configura el handler de consola del logger raíz 'despensa' (una sola vez)."""
    global _configured
    root = logging.getLogger("despensa")
    root.setLevel(level)
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        _configured = True
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
