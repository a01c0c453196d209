"""Interactive prompts for the CLI layer.

:class:`QuestionaryPrompter` satisfies the core
:class:`~crystallize_setup.core.protocols.Prompter` protocol with
questionary text and arrow-key select prompts.  questionary is imported
lazily so non-interactive commands work without it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from crystallize_setup.core.models import Choice
from crystallize_setup.exceptions import MissingDependencyError, SelectionCancelledError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class QuestionaryPrompter:
    """Concrete :class:`Prompter` backed by questionary.

    ``ask()`` returns ``None`` on Ctrl+C / Esc; both methods turn that
    into :class:`SelectionCancelledError`.
    """

    def ask_text(self, message: str) -> str:
        questionary = _import_questionary()
        answer: str | None = questionary.text(message).ask()
        if answer is None:
            raise SelectionCancelledError(
                "Prompt cancelled.",
                hint="Set the value in your .env file to skip this prompt.",
            )
        return answer.strip()

    def ask_choice(self, message: str, choices: Sequence[Choice]) -> str:
        if not choices:
            raise SelectionCancelledError(f"Nothing to choose from: {message}")

        questionary = _import_questionary()
        selected: str | None = questionary.select(
            message,
            choices=[
                questionary.Choice(title=choice.label, value=choice.value)
                for choice in choices
            ],
            use_arrow_keys=True,
            use_shortcuts=False,
        ).ask()

        if selected is None:
            raise SelectionCancelledError(
                "Nothing selected.",
                hint="Use arrow keys to pick an option, then press Enter.",
            )
        return selected
