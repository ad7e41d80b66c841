"""Ability bundles handed to every action, task and question."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from .errors import missing_ability

if TYPE_CHECKING:
    from .driver import DomainDriver


@dataclass(frozen=True)
class Abilities:
    """Immutable set of capabilities an actor carries.

    The fields are a closed set. ``extended`` returns a new bundle and never
    touches the original, so a bundle can be shared freely between actors.
    """

    name: str | None = None
    driver: DomainDriver | None = None

    def extended(self, **changes: Any) -> Abilities:
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    def require(self, ability: str) -> Any:
        """Return the capability named ``ability``.

        Raises:
            MissingAbilityError: If the bundle has no such field or it is unset
        """
        value = getattr(self, ability, None) if ability in _FIELD_NAMES else None
        if value is None:
            raise missing_ability(ability, self.name)
        return value

    def as_dict(self) -> dict[str, Any]:
        """Capabilities that are set, keyed by field name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


_FIELD_NAMES = frozenset(f.name for f in fields(Abilities))
