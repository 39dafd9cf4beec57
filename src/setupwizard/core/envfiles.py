"""Text-level edits of ``env/.env*`` files.

Files are never parsed into a map for writing: each edit reads the whole
file, substitutes ``KEY=...`` lines by regex and writes the whole file back.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

from dotenv import dotenv_values

logger = logging.getLogger("setupwizard.envfiles")

PathLike = Union[str, Path]


def key_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf"^({re.escape(key)})=.*$", re.MULTILINE)


def replace_in_file(
    path: PathLike,
    pattern: re.Pattern[str],
    replacement: str,
    count: int = 1,
) -> Optional[str]:
    """Substitute ``pattern`` in ``path`` and write the result back.

    Returns ``None`` on success, or a diagnostic naming the pattern and the
    file when nothing matched (the file is left untouched in that case).
    ``count=0`` replaces every match.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if not pattern.search(text):
        logger.debug("Pattern %s not found in %s", pattern.pattern, path)
        return f"Failed to find {pattern.pattern} in {path}"
    text = pattern.sub(replacement, text, count=count)
    path.write_text(text, encoding="utf-8")
    logger.info("Rewrote %s in %s", pattern.pattern, path)
    return None


def set_key(path: PathLike, key: str, value: str, count: int = 1) -> Optional[str]:
    # \g<1> keeps the key token; a plain \1 would break on values starting with a digit
    replacement = r"\g<1>=" + value.replace("\\", r"\\")
    return replace_in_file(path, key_pattern(key), replacement, count=count)


def read_origin_host(path: PathLike, key: str = "APP_ORIGIN") -> str:
    values = dotenv_values(path)
    origin = values.get(key)
    if not origin:
        raise KeyError(f"{key} is not set in {path}")
    host = urlparse(origin).hostname
    if not host:
        raise ValueError(f"Invalid URL in {key}: {origin!r}")
    return host
