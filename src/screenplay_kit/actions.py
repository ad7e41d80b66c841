"""Actions: single interactions an actor performs against the domain driver.

An action is any callable taking an ``Abilities`` bundle. The named actions
below are ``Action`` values so they describe themselves in logs and failure
messages; plain functions work just as well.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .abilities import Abilities
from .driver import Project

Step = Callable[[Abilities], Any]


@dataclass(frozen=True)
class Action:
    """A described, stateless interaction."""

    description: str
    perform: Callable[[Abilities], None]

    def __call__(self, abilities: Abilities) -> None:
        self.perform(abilities)

    def __str__(self) -> str:
        return self.description


def describe(step: Any) -> str:
    """Human-readable name for an action, task, question or plain function."""
    description = getattr(step, "description", None)
    if description:
        return str(description)
    return getattr(step, "__name__", repr(step))


def _create_own_account(abilities: Abilities) -> None:
    abilities.require("driver").create_account(abilities.require("name"))


def _activate_account(abilities: Abilities) -> None:
    abilities.require("driver").activate_account(abilities.require("name"))


def _sign_in(abilities: Abilities) -> None:
    abilities.require("driver").sign_in(abilities.require("name"))


class CreateAccount:
    """Account creation variants."""

    for_themselves = Action("create an account for themselves", _create_own_account)


ActivateAccount = Action("activate their account", _activate_account)

SignIn = Action("sign in", _sign_in)


class CreateProject:
    """Project creation variants."""

    @staticmethod
    def named(project_name: str) -> Action:
        """Action creating a project called ``project_name`` for the actor."""

        def create(abilities: Abilities) -> None:
            abilities.require("driver").create_project(
                abilities.require("name"), Project(name=project_name)
            )

        return Action(f"create a project named '{project_name}'", create)
