"""Error types raised by the screenplay core.

Assertion failures are not modelled here: they are plain ``AssertionError``
instances raised by hamcrest inside ``check_that`` so test runners report
them natively. Domain failures (e.g. a refused sign in) are not errors at
all; they are observed through questions.
"""

from dataclasses import dataclass, field
from typing import Any

# Error codes
MISSING_ABILITY = "missing_ability"
UNKNOWN_ACTOR = "unknown_actor"
CONFIG_ERROR = "config_error"


@dataclass
class ScreenplayError(Exception):
    """Base error class for screenplay errors."""

    code: str
    message: str
    data: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (used for --json CLI output)."""
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data:
            error["data"] = self.data
        return error


@dataclass
class MissingAbilityError(ScreenplayError):
    """A step needed a capability the actor's ability bundle does not carry."""

    code: str = MISSING_ABILITY
    message: str = "Missing ability"


@dataclass
class UnknownActorError(ScreenplayError):
    """An actor name outside the configured persona roster was mentioned."""

    code: str = UNKNOWN_ACTOR
    message: str = "Unknown actor"


@dataclass
class ConfigError(ScreenplayError):
    """Configuration file or environment value is invalid."""

    code: str = CONFIG_ERROR
    message: str = "Invalid configuration"


def missing_ability(ability: str, actor: str | None = None) -> MissingAbilityError:
    """Build the error raised when a bundle lacks ``ability``.

    Args:
        ability: Name of the capability field that was required
        actor: Name of the actor, when the bundle carries one

    Returns:
        MissingAbilityError with a readable message
    """
    who = actor or "This actor"
    return MissingAbilityError(
        message=f"{who} does not have the '{ability}' ability",
        data={"ability": ability, "actor": actor},
    )


def unknown_actor(name: str, personas: tuple[str, ...]) -> UnknownActorError:
    """Build the error raised for a persona name outside the roster.

    Args:
        name: The name that was mentioned
        personas: The configured roster

    Returns:
        UnknownActorError listing the known personas
    """
    return UnknownActorError(
        message=f"Unknown actor '{name}'. Known actors: {', '.join(personas)}",
        data={"name": name, "personas": list(personas)},
    )
