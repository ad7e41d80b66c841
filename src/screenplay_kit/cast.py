"""Per-scenario roster of actors.

A ``Cast`` is created for one scenario with that scenario's driver and
thrown away afterwards. Actor names are validated against a closed roster
of personas; anything else is a configuration error.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType

from .actor import Actor
from .driver import DomainDriver
from .errors import unknown_actor
from .shared.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PERSONAS: tuple[str, ...] = ("Sue", "Tanya", "Bob")


def persona_pattern(personas: Iterable[str], capture: bool = True) -> str:
    """Regex alternation matching exactly one of ``personas``."""
    opening = "(" if capture else "(?:"
    return opening + "|".join(re.escape(p) for p in personas) + ")"


def persona_type(personas: Iterable[str] = DEFAULT_PERSONAS) -> Callable[[str], str]:
    """Step-parameter converter recognising persona names.

    The returned function carries a ``pattern`` attribute, which is the
    convention ``parse`` (and therefore ``pytest_bdd.parsers.parse``) uses
    for custom types. It returns the matched name; resolve it to an actor
    with ``Cast.actor_named`` inside the step.
    """
    roster = tuple(personas)

    def convert(text: str) -> str:
        if text not in roster:
            raise unknown_actor(text, roster)
        return text

    convert.pattern = persona_pattern(roster, capture=False)  # type: ignore[attr-defined]
    convert.regex_group_count = 0  # type: ignore[attr-defined]
    return convert


class Cast:
    """Resolves persona names to actors for a single scenario.

    With ``cache_actors`` on, repeated mentions of a name return the same
    Actor. Off, each mention builds a fresh Actor over the same driver.
    """

    def __init__(
        self,
        driver: DomainDriver,
        personas: Iterable[str] = DEFAULT_PERSONAS,
        cache_actors: bool = True,
    ):
        self.driver = driver
        self.personas = tuple(personas)
        self.cache_actors = cache_actors
        self._actors: dict[str, Actor] = {}

    @property
    def pattern(self) -> str:
        return persona_pattern(self.personas)

    @property
    def actors(self) -> Mapping[str, Actor]:
        """Actors built so far (cached mode only)."""
        return MappingProxyType(self._actors)

    def actor_named(self, name: str) -> Actor:
        """Return the actor for ``name``.

        Raises:
            UnknownActorError: If ``name`` is not in the roster
        """
        if name not in self.personas:
            raise unknown_actor(name, self.personas)

        if self.cache_actors and name in self._actors:
            return self._actors[name]

        actor = Actor.named(name, self.driver)
        logger.debug("actor_enters", actor=name, cached=self.cache_actors)
        if self.cache_actors:
            self._actors[name] = actor
        return actor

    def dismiss(self) -> None:
        """Forget every actor at the end of the scenario."""
        self._actors.clear()
