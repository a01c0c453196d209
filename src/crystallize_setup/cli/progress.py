"""Rich-based transient spinner shown around slow API calls.

:func:`spinner` matches the core ``StatusFactory`` signature: it takes
a message and returns a context manager.  The spinner disappears when
the block exits, successful or not.
"""

from __future__ import annotations

from typing import Any

from crystallize_setup.cli.console import get_rich_console


class RichSpinner:
    """Start/stop wrapper around :class:`rich.status.Status`.

    Usage::

        with RichSpinner("Getting tenant info"):
            info = fetch_tenant_info(client, context)
    """

    def __init__(self, message: str) -> None:
        # Raises MissingDependencyError when rich is absent.
        self._status: Any = get_rich_console().status(message, spinner="dots")
        self._started: bool = False

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> RichSpinner:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        if not self._started:
            self._status.start()
            self._started = True

    def stop(self) -> None:
        """Stop the spinner (idempotent)."""
        if self._started:
            self._status.stop()
            self._started = False


def spinner(message: str) -> RichSpinner:
    return RichSpinner(message)
