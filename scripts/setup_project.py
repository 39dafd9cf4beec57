#!/usr/bin/env python3
"""Interactive project setup.

Configures the application origin, bundle bucket, and per-environment
Google Cloud project IDs / database names in ``env/.env*``.  Run once from
the project root::

    python scripts/setup_project.py

The script can remove itself (and its dependencies) when it is done.
"""

from setupwizard.cli import app

if __name__ == "__main__":
    app()
