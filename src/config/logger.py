"""Application logging utilities.

Logs are emitted to stdout using Python's ``logging`` module so that the
hosting platform's log drain picks them up.
"""

import logging
import os
import sys
from typing import Optional

# Module & line number make the origin of each message clear even though
# every file logs through the root logger.
DEFAULT_FORMAT = "%(asctime)s - %(module)s:%(lineno)d - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    stream: Optional[object] = None,
    fmt: str = DEFAULT_FORMAT,
) -> None:
    """Configure the root logger exactly once; safe to call repeatedly.

    * If the ``LOG_LEVEL`` environment variable is set, it overrides *level*.
    * httpx request lines are kept at WARNING so collaborator API keys passed
      as query parameters never reach the log.
    """
    env_level = os.getenv("LOG_LEVEL")
    if env_level:
        level = getattr(logging, env_level.upper(), level)

    if stream is None:
        stream = sys.stdout

    root = logging.getLogger()

    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)

    for pkg in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(pkg).handlers = root.handlers
        logging.getLogger(pkg).setLevel(level)

    for pkg in ("httpx", "httpcore"):
        logging.getLogger(pkg).setLevel(logging.WARNING)
