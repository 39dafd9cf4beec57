"""The fixed question sequence asked by the setup wizard.

Each question's validator is the only place where environment files are
written: a validator returns ``None`` to accept the answer, or an error
message that is shown to the operator before the question is asked again.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from setupwizard.core.config import Settings
from setupwizard.core.envfiles import read_origin_host, set_key

Answers = dict[str, Any]

INPUT = "input"
CONFIRM = "confirm"

APP_ORIGIN = "APP_ORIGIN"
APP_NAME = "APP_NAME"
PKG_BUCKET = "PKG_BUCKET"
GOOGLE_CLOUD_PROJECT = "GOOGLE_CLOUD_PROJECT"
PGDATABASE = "PGDATABASE"

_DOMAIN_RE = re.compile(r"\w[\w.-]{0,61}\w\.\w{2,}", re.ASCII)
_BUCKET_RE = re.compile(r"\w[\w.-]*\w", re.ASCII)
_DEV_MARKER_RE = re.compile(r"[-_](development|dev)$")


class EnvironmentKind(Enum):
    PROD = "prod"
    TEST = "test"
    DEV = "dev"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    EnvironmentKind.PROD: "production",
    EnvironmentKind.TEST: "test (QA)",
    EnvironmentKind.DEV: "development",
}


@dataclass
class Question:
    name: str
    message: str
    kind: str = INPUT
    default: Union[Any, Callable[[Answers], Any], None] = None
    when: Optional[Callable[[Answers], bool]] = None
    validate: Optional[Callable[[Any], Optional[str]]] = None

    def applies(self, answers: Answers) -> bool:
        return self.when is None or bool(self.when(answers))

    def default_for(self, answers: Answers) -> Any:
        if callable(self.default):
            return self.default(answers)
        return self.default


def is_valid_domain(value: str) -> bool:
    return _DOMAIN_RE.fullmatch(value) is not None


def is_valid_bucket(value: str) -> bool:
    return _BUCKET_RE.fullmatch(value) is not None


def short_name(domain: str) -> str:
    """``www.example.com`` -> ``www_example``."""
    return domain[: domain.rfind(".")].replace(".", "_")


def local_database_name(name: str) -> str:
    return _DEV_MARKER_RE.sub("_local", name, count=1)


def _setup_confirmed(answers: Answers) -> bool:
    return bool(answers.get("setup"))


def build_questions(settings: Settings) -> list[Question]:
    def default_domain(answers: Answers) -> str:
        return read_origin_host(settings.env_file("prod"), APP_ORIGIN)

    def validate_domain(domain: str) -> Optional[str]:
        if not is_valid_domain(domain):
            return "Requires a valid domain name."
        return (
            set_key(settings.env_file("prod"), APP_ORIGIN, f"https://{domain}")
            or set_key(settings.env_file("test"), APP_ORIGIN, f"https://test.{domain}")
            or set_key(settings.env_file("dev"), APP_ORIGIN, f"https://dev.{domain}")
            or set_key(settings.env_file(), APP_NAME, short_name(domain))
        )

    def validate_bucket(value: str) -> Optional[str]:
        if not is_valid_bucket(value):
            return "Requires a valid GCS bucket name."
        return set_key(settings.env_file(), PKG_BUCKET, value)

    questions = [
        Question(
            name="setup",
            kind=CONFIRM,
            message=(
                "Configure this project for production, test (QA), "
                "and shared development environments?"
            ),
            default=True,
        ),
        Question(
            name="domain",
            message="Domain name where the app will be hosted:",
            when=_setup_confirmed,
            default=default_domain,
            validate=validate_domain,
        ),
        Question(
            name="pkg",
            message="GCS bucket for the app bundles:",
            when=_setup_confirmed,
            default=lambda answers: f"pkg.{answers['domain']}",
            validate=validate_bucket,
        ),
    ]
    questions.extend(_project_question(settings, kind) for kind in EnvironmentKind)
    questions.append(
        Question(
            name="clean",
            kind=CONFIRM,
            message="Do you want to remove this setup script?",
            when=_setup_confirmed,
            default=False,
        )
    )
    return questions


def _project_question(settings: Settings, kind: EnvironmentKind) -> Question:
    def default_project(answers: Answers) -> str:
        return f"{short_name(answers['domain']).lower()}_{kind.value}"

    def validate_project(value: str) -> Optional[str]:
        # every occurrence of the two keys is rewritten, not just the first
        path = settings.env_file(kind.value)
        error = (
            set_key(path, GOOGLE_CLOUD_PROJECT, value, count=0)
            or set_key(path, PGDATABASE, value, count=0)
        )
        if error or kind is not EnvironmentKind.DEV:
            return error
        local = settings.env_file("local")
        return (
            set_key(local, GOOGLE_CLOUD_PROJECT, value, count=0)
            or set_key(local, PGDATABASE, local_database_name(value), count=0)
        )

    return Question(
        name=f"gcp_project_{kind.value}",
        message=f"GCP project ID for {kind.label} ({kind.value}):",
        when=_setup_confirmed,
        default=default_project,
        validate=validate_project,
    )
