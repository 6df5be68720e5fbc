"""Injectable console service for user-facing messages.

Components that report progress or problems to a person (the date
coercion pass, the batch collector, the markdown writer) accept a
:class:`Console` argument instead of printing directly.  Two
implementations are provided:

* :class:`LoggingConsole` -- forwards to a stdlib :mod:`logging` logger.
  This is the default everywhere, so the library stays silent unless the
  application configures logging.
* :class:`ColorConsole` -- writes colour-coded lines to the terminal with
  `click <https://click.palletsprojects.com/>`_.

Example::

    from mdfolio_core import ColorConsole
    from mdfolio_fs import LocalMarkdownCollector

    collector = LocalMarkdownCollector(Path("./notes"), console=ColorConsole())
    result = await collector.collect()
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

import click


class Console(ABC):
    """Minimal interface for reporting messages to the user."""

    @abstractmethod
    def info(self, message: str) -> None: ...

    @abstractmethod
    def warn(self, message: str) -> None: ...

    @abstractmethod
    def error(self, message: str) -> None: ...

    @abstractmethod
    def success(self, message: str) -> None: ...


class LoggingConsole(Console):
    """Console that forwards every message to a :class:`logging.Logger`.

    ``success`` messages are logged at ``INFO``.

    Args:
        logger: Target logger.  Defaults to the ``mdfolio`` logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("mdfolio")

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def success(self, message: str) -> None:
        self._logger.info(message)

    def __repr__(self) -> str:
        return f"LoggingConsole({self._logger.name!r})"


class ColorConsole(Console):
    """Console that prints colour-coded lines with :func:`click.echo`.

    Colours: info cyan, warn yellow, error bright red, success bright
    green.  Errors always go to ``stderr``; other messages go to
    ``stdout`` unless *err* is true.

    Args:
        err: Send every message to ``stderr``.
        color: Force colour on or off.  ``None`` lets click decide based
            on whether the stream is a terminal.
    """

    def __init__(self, *, err: bool = False, color: bool | None = None) -> None:
        self._err = err
        self._color = color

    def info(self, message: str) -> None:
        self._echo(click.style(message, fg="cyan"))

    def warn(self, message: str) -> None:
        self._echo(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        self._echo(click.style(message, fg="bright_red"), err=True)

    def success(self, message: str) -> None:
        self._echo(click.style(message, fg="bright_green"))

    def json(self, obj: Any) -> None:
        """Print *obj* as indented JSON in green."""
        self._echo(click.style(json.dumps(obj, indent=4, default=str), fg="green"))

    def _echo(self, text: str, *, err: bool = False) -> None:
        click.echo(text, err=err or self._err, color=self._color)


def default_console(name: str) -> Console:
    """Return a :class:`LoggingConsole` bound to the logger *name*."""
    return LoggingConsole(logging.getLogger(name))
