from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

@dataclass
class Settings:
    project_root: Path
    log_level: str
    log_dir: str | None
    script_path: str
    manifest_path: str
    entry_name: str
    package_manager: str
    cleanup_packages: list[str]
    migrate_command: str
    start_command: str

    @staticmethod
    def from_env() -> "Settings":
        cleanup = os.getenv("SETUP_CLEANUP_PACKAGES", "typer,python-dotenv")
        return Settings(
            project_root=Path(os.getenv("SETUP_PROJECT_ROOT") or os.getcwd()),
            log_level=os.getenv("SETUP_LOG_LEVEL", "warning"),
            log_dir=os.getenv("SETUP_LOG_DIR") or None,
            script_path=os.getenv("SETUP_SCRIPT_PATH", "scripts/setup_project.py"),
            manifest_path=os.getenv("SETUP_MANIFEST_PATH", "pyproject.toml"),
            entry_name=os.getenv("SETUP_ENTRY_NAME", "setup"),
            package_manager=os.getenv("SETUP_PACKAGE_MANAGER", "uv"),
            cleanup_packages=[v.strip() for v in cleanup.split(",") if v.strip()],
            migrate_command=os.getenv("SETUP_MIGRATE_COMMAND", "uv run alembic upgrade head"),
            start_command=os.getenv("SETUP_START_COMMAND", "uv run start"),
        )

    def env_file(self, suffix: str = "") -> Path:
        """Path of ``env/.env`` or ``env/.env.<suffix>`` under the project root."""
        name = f".env.{suffix}" if suffix else ".env"
        return self.project_root / "env" / name

    def resolve(self, relative: str) -> Path:
        return self.project_root / relative
