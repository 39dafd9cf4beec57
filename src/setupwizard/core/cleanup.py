"""Self-removal of the setup wizard once a project has been configured."""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path
from typing import Sequence

logger = logging.getLogger("setupwizard.cleanup")


class CleanupError(RuntimeError):
    pass


def remove_script(path: Path) -> bool:
    if not path.exists():
        logger.warning("Setup script %s is already gone", path)
        return False
    path.unlink()
    logger.info("Removed %s", path)
    return True


def _entry_pattern(entry: str) -> re.Pattern[str]:
    # matches `setup = "..."` (pyproject.toml) as well as `"setup": "...",` (package.json)
    name = re.escape(entry)
    return re.compile(
        rf'^[ \t]*(?:{name}|"{name}")[ \t]*[=:][ \t]*".*?"[ \t]*(?P<comma>,?)[ \t]*(?:\r?\n|\Z)',
        re.MULTILINE,
    )


_TRAILING_COMMA_RE = re.compile(r",([ \t]*\r?\n)\Z")


def strip_setup_entry(manifest: Path, entry: str = "setup") -> bool:
    """Drop the line declaring the ``entry`` command from the manifest text.

    When the entry closes a JSON object, the comma ending the previous
    member is dropped too.
    """
    text = manifest.read_text(encoding="utf-8")
    match = _entry_pattern(entry).search(text)
    if not match:
        logger.warning("No %r entry found in %s", entry, manifest)
        return False
    head, tail = text[: match.start()], text[match.end():]
    if not match.group("comma") and tail.lstrip().startswith("}"):
        head = _TRAILING_COMMA_RE.sub(r"\1", head)
    manifest.write_text(head + tail, encoding="utf-8")
    logger.info("Removed %r entry from %s", entry, manifest)
    return True


def remove_dependencies(
    package_manager: str,
    packages: Sequence[str],
    cwd: Path,
) -> subprocess.CompletedProcess[str]:
    """Run ``<package_manager> remove <packages...>`` in the project root."""
    cmd = [package_manager, "remove", *packages]
    logger.info("Running %s", " ".join(cmd))
    result = subprocess.run(
        cmd,
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=False,
    )
    if result.stdout:
        logger.debug("%s", result.stdout.strip())
    if result.returncode != 0:
        raise CleanupError(
            f"{' '.join(cmd)} exited with {result.returncode}: {result.stderr.strip()}"
        )
    return result
