# src/tasktime/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

import click

logger = logging.getLogger(__name__)


class ConsoleConfirmer:
    """
    Interactive yes/no prompt on the terminal.

    Only "Y" or "N" (any case, surrounding whitespace ignored) are accepted;
    anything else reprompts. End of input counts as "N".
    """

    def __init__(
        self,
        read_line: Callable[[], str] | None = None,
        emit: Callable[[str], None] | None = None,
    ) -> None:
        self._read_line = read_line or input
        self._emit = emit or click.echo

    def ask(self, question: str) -> bool:
        while True:
            self._emit(question)
            try:
                response = self._read_line()
            except EOFError:
                logger.info("Console EOF while waiting for confirmation, treating as 'N'.")
                return False

            answer = response.strip().lower()
            if answer == "y":
                return True
            if answer == "n":
                return False
            self._emit("Invalid input. Please enter 'Y' or 'N'.")
