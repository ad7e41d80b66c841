"""The domain driver surface the screenplay core consumes.

Every call is keyed by actor name. Implementations wrap the application
under test; the core never reaches past this interface.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from hamcrest import has_item, has_property
from hamcrest.core.matcher import Matcher


@dataclass(frozen=True)
class Project:
    """A project record as created through the driver."""

    name: str


@runtime_checkable
class DomainDriver(Protocol):
    """Operations the application under test exposes to actors.

    ``activate_account`` also signs the account holder in, the way following
    an activation link does in the application.
    """

    def create_account(self, name: str) -> None: ...

    def activate_account(self, name: str) -> None: ...

    def sign_in(self, name: str) -> None: ...

    def create_project(self, name: str, project: Project) -> None: ...

    def get_projects(self, name: str) -> Sequence[Any]: ...

    def is_authenticated(self, name: str) -> bool: ...

    def authentication_error(self, name: str) -> str | None: ...


def has_project_named(project_name: str) -> Matcher[Any]:
    """Matcher for a project collection containing a record named ``project_name``."""
    return has_item(has_property("name", project_name))
