"""Actors: the single entry point through which steps run."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from .abilities import Abilities
from .actions import Step, describe
from .shared.logging import get_logger

if TYPE_CHECKING:
    from .driver import DomainDriver
    from .questions import Question

logger = get_logger(__name__)

T = TypeVar("T")


class Actor:
    """A named identity carrying a frozen ability bundle.

    ``attempts_to`` is a bound method and can be passed around on its own.
    """

    def __init__(self, abilities: Abilities):
        self.abilities = abilities

    @classmethod
    def named(cls, name: str, driver: DomainDriver | None = None) -> Actor:
        """Build an actor called ``name`` that can use ``driver``."""
        return cls(Abilities(name=name, driver=driver))

    @property
    def name(self) -> str | None:
        return self.abilities.name

    def who_can(self, **abilities: Any) -> Actor:
        """Return a new actor whose bundle extends this one."""
        return Actor(self.abilities.extended(**abilities))

    def attempts_to(self, *steps: Step) -> None:
        """Perform ``steps`` in order with this actor's abilities.

        Exceptions propagate unchanged and stop the remaining steps.
        """
        for step in steps:
            logger.debug("actor_attempts", actor=self.name, step=describe(step))
            step(self.abilities)

    def asks(self, question: Question[T]) -> T:
        """Answer ``question`` from this actor's point of view."""
        answer = question(self.abilities)
        logger.debug("actor_asks", actor=self.name, question=describe(question), answer=answer)
        return answer

    def __repr__(self) -> str:
        return f"Actor(name={self.name!r})"
