from __future__ import annotations

import logging

import typer
from dotenv import load_dotenv

app = typer.Typer(add_completion=False)

logger = logging.getLogger("setupwizard")

def _load_env() -> None:
    load_dotenv()

@app.command()
def setup() -> None:
    """Configure the environment files of this project for deployment."""
    _load_env()

    from setupwizard.core.config import Settings
    from setupwizard.core.logging_config import setup_logging
    from setupwizard.core.wizard import run

    settings = Settings.from_env()
    setup_logging(log_level=settings.log_level, log_dir=settings.log_dir)

    try:
        run(settings)
    except (typer.Abort, typer.Exit):
        raise
    except Exception:
        logger.exception("Setup failed")
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
