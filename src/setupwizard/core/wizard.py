"""Runs the question sequence against the operator and wraps up."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

import typer

from setupwizard.core import cleanup
from setupwizard.core.config import Settings
from setupwizard.core.questions import CONFIRM, Answers, Question, build_questions

logger = logging.getLogger("setupwizard.wizard")

PromptFn = Callable[..., Any]


def _error(message: str) -> None:
    typer.secho(f">> {message}", fg=typer.colors.RED, err=True)


def ask(
    questions: Iterable[Question],
    prompt: PromptFn = typer.prompt,
    confirm: PromptFn = typer.confirm,
    report_error: Callable[[str], None] = _error,
) -> Answers:
    """Ask every applicable question in order and collect the answers.

    A question whose validator returns an error message is asked again
    until the validator accepts the answer.
    """
    answers: Answers = {}
    for question in questions:
        if not question.applies(answers):
            logger.debug("Skipping %s", question.name)
            continue
        default = question.default_for(answers)
        while True:
            if question.kind == CONFIRM:
                value: Any = confirm(question.message, default=bool(default))
            else:
                value = str(prompt(question.message, default=default)).strip()
            error = question.validate(value) if question.validate else None
            if error is None:
                break
            report_error(error)
        answers[question.name] = value
        logger.debug("Answered %s", question.name)
    return answers


def finish(answers: Answers, settings: Settings) -> None:
    if answers.get("clean"):
        cleanup.remove_script(settings.resolve(settings.script_path))
        cleanup.strip_setup_entry(settings.resolve(settings.manifest_path), settings.entry_name)
        if settings.cleanup_packages:
            cleanup.remove_dependencies(
                settings.package_manager,
                settings.cleanup_packages,
                settings.project_root,
            )

    if answers.get("setup"):
        typer.echo("  ")
        typer.echo("  Done! Now you can migrate the database and launch the app by running:")
        typer.echo("  ")
        typer.echo(f"  $ {settings.migrate_command}")
        typer.echo(f"  $ {settings.start_command}")
        typer.echo("  ")
    else:
        typer.echo("  No problem. You can run this script at any time later.")


def run(settings: Settings) -> Answers:
    answers = ask(build_questions(settings))
    finish(answers, settings)
    return answers
