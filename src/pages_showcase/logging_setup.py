import logging
import os
from typing import Optional


def setup_logging(
    level: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """
    Minimal logging setup.
    - Uses LOG_LEVEL env if level is None (default INFO).
    - One handler via logging.basicConfig: stderr, or *handler* if given
      (the TUI passes textual's TextualHandler).
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    kwargs: dict = {}
    if handler is not None:
        kwargs["handlers"] = [handler]
    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
        **kwargs,
    )
