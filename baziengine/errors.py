"""Exception hierarchy shared by the chart engine and its collaborators."""

from __future__ import annotations

__all__ = ["BaziError", "InvalidInputError", "CollaboratorError"]


class BaziError(Exception):
    """Base class for errors raised by :mod:`baziengine`."""


class InvalidInputError(BaziError, ValueError):
    """Raised when a birth record is malformed or outside the supported range."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class CollaboratorError(BaziError, RuntimeError):
    """Raised when a calendar collaborator cannot answer for a given date."""
