"""Exception hierarchy shared by the models, engine, and loader."""

from __future__ import annotations


class RicochetError(Exception):
    """Base class for every error raised by the backend."""


class BoardError(RicochetError, ValueError):
    """A board precondition was violated (bad coordinate, duplicate wall, ...)."""


class UnknownRobotError(BoardError, KeyError):
    """No robot with the requested name is on the board."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Robot {name} does not exist")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class PuzzleFormatError(RicochetError):
    """The puzzle description could not be parsed."""

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class CommandReconstructionError(RicochetError):
    """No single move explains the difference between two boards."""
