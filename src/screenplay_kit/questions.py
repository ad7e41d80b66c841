"""Questions: side-effect-free observations of the application state."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .abilities import Abilities

T = TypeVar("T")


@dataclass(frozen=True)
class Question(Generic[T]):
    """A described observation returning a value of type ``T``."""

    description: str
    ask: Callable[[Abilities], T]

    def __call__(self, abilities: Abilities) -> T:
        return self.ask(abilities)

    def __str__(self) -> str:
        return self.description


def _projects_visible(abilities: Abilities) -> list[Any]:
    return list(abilities.require("driver").get_projects(abilities.require("name")))


def _is_authenticated(abilities: Abilities) -> bool:
    return bool(abilities.require("driver").is_authenticated(abilities.require("name")))


def _authentication_error(abilities: Abilities) -> str | None:
    return abilities.require("driver").authentication_error(abilities.require("name"))


ProjectsVisible: Question[list[Any]] = Question("the projects they can see", _projects_visible)

IsAuthenticated: Question[bool] = Question("whether they are authenticated", _is_authenticated)

AuthenticationError: Question[str | None] = Question(
    "their last authentication error", _authentication_error
)
