"""Centralized logging configuration for the setup wizard.

Operator-facing text is written with ``typer.echo``; the logging system
carries diagnostics to stderr and, when ``SETUP_LOG_DIR`` is set, to a
rotating ``setup-wizard.log`` file in that directory.
"""
from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from typing import Optional

LOG_FILE_NAME = "setup-wizard.log"


def setup_logging(log_level: str = "warning", log_dir: Optional[str] = None) -> None:
    """Configure the root logger with a stderr handler and an optional file.

    This should be called once at startup.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if log_dir else level)

    # Clear any existing handlers (avoid duplicate output on re-init)
    root.handlers.clear()

    fmt = logging.Formatter(
        "%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(fmt)
    root.addHandler(stderr_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=1024 * 1024,  # 1 MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)  # Capture everything to file
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    logging.getLogger("setupwizard").debug(
        "Logging initialized: log_dir=%s, level=%s", log_dir, log_level
    )
