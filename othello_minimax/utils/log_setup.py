from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once.

    ``level`` wins over the OTHELLO_LOG_LEVEL env var; the default is WARNING.
    """
    if getattr(setup_logging, "_configured", False):
        return
    name = (level or os.environ.get("OTHELLO_LOG_LEVEL", "WARNING")).upper()
    numeric: int = getattr(logging, name, logging.WARNING)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    setup_logging._configured = True  # type: ignore[attr-defined]
