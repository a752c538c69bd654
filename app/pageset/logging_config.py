from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Configure root logging once for a CLI run.

    Logs go to stderr, or to ``log_file`` when one is given (its parent
    directory is created if missing).
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    handlers: list[logging.Handler]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers = [logging.FileHandler(path, mode="a", encoding="utf-8")]
    else:
        handlers = [logging.StreamHandler()]

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
        handler.close()
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, handlers=handlers)
    logger.debug("Logging configured. Level: %s. File: %s", level, log_file or "<stderr>")
