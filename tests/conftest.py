from __future__ import annotations

import logging
from pathlib import Path

import pytest

from setupwizard.core.config import Settings

ENV_FILES = {
    ".env": "APP_NAME=example\nPKG_BUCKET=pkg.example.com\nAPP_VERSION=1.0.0\n",
    ".env.prod": (
        "APP_ORIGIN=https://example.com\n"
        "GOOGLE_CLOUD_PROJECT=example_prod\n"
        "PGDATABASE=example_prod\n"
    ),
    ".env.test": (
        "APP_ORIGIN=https://test.example.com\n"
        "GOOGLE_CLOUD_PROJECT=example_test\n"
        "PGDATABASE=example_test\n"
    ),
    ".env.dev": (
        "APP_ORIGIN=https://dev.example.com\n"
        "GOOGLE_CLOUD_PROJECT=example_dev\n"
        "PGDATABASE=example_dev\n"
    ),
    ".env.local": (
        "# Local overrides\n"
        "GOOGLE_CLOUD_PROJECT=example_dev\n"
        "PGHOST=localhost\n"
        "PGDATABASE=example_local\n"
    ),
}

PYPROJECT = """[project]
name = "webapp"
dependencies = [
    "typer",
    "python-dotenv",
]

[project.scripts]
setup = "setupwizard.cli:app"
start = "webapp.main:run"
"""


@pytest.fixture
def project(tmp_path: Path) -> Path:
    env_dir = tmp_path / "env"
    env_dir.mkdir()
    for name, text in ENV_FILES.items():
        (env_dir / name).write_text(text, encoding="utf-8")
    (tmp_path / "scripts").mkdir()
    (tmp_path / "scripts" / "setup_project.py").write_text("# setup\n", encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text(PYPROJECT, encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(project: Path) -> Settings:
    return Settings(
        project_root=project,
        log_level="warning",
        log_dir=None,
        script_path="scripts/setup_project.py",
        manifest_path="pyproject.toml",
        entry_name="setup",
        package_manager="uv",
        cleanup_packages=["typer", "python-dotenv"],
        migrate_command="uv run alembic upgrade head",
        start_command="uv run start",
    )


@pytest.fixture
def env_snapshot(project: Path):
    def snapshot() -> dict[str, str]:
        return {p.name: p.read_text(encoding="utf-8") for p in (project / "env").iterdir()}
    return snapshot


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
