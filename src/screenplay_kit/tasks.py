"""Tasks: fixed, ordered compositions of actions and other tasks."""

from __future__ import annotations

from dataclasses import dataclass

from .abilities import Abilities
from .actions import ActivateAccount, CreateAccount, Step


@dataclass(frozen=True)
class Task:
    """A named sequence of steps run in declaration order.

    The first step that raises aborts the rest; the exception propagates.
    """

    description: str
    steps: tuple[Step, ...]

    def __call__(self, abilities: Abilities) -> None:
        for step in self.steps:
            step(abilities)

    def __str__(self) -> str:
        return self.description


def task(description: str, *steps: Step) -> Task:
    """Compose ``steps`` into a Task called ``description``."""
    return Task(description, tuple(steps))


# Order matters: an account must exist before it can be activated.
SignUp = task("sign up", CreateAccount.for_themselves, ActivateAccount)
