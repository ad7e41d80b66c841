"""Step definitions for the scenario features.

Each step resolves its actor through the per-scenario cast and expresses
what happens as screenplay actions, tasks and checks.
"""

from __future__ import annotations

from hamcrest import empty, is_, matches_regexp, not_
from pytest_bdd import given, parsers, then, when

from screenplay_kit import (
    ActivateAccount,
    AuthenticationError,
    Cast,
    CreateAccount,
    CreateProject,
    IsAuthenticated,
    ProjectsVisible,
    SignIn,
    SignUp,
    check_that,
    has_project_named,
)
from screenplay_kit.pytest_plugin import actor_parameter_types

PROJECT_NAME = "a-project"

# Roster from config file + environment, read when this module is imported
ACTOR_TYPES = actor_parameter_types()


def actor_step(text: str) -> parsers.parse:
    """Parser for step text with an ``{actor:Actor}`` placeholder."""
    return parsers.parse(text, extra_types=ACTOR_TYPES)


# ---------------------------------------------------------------------------
# Given
# ---------------------------------------------------------------------------


@given(actor_step("{actor:Actor} has created an account"))
def created_account(cast: Cast, actor: str) -> None:
    cast.actor_named(actor).attempts_to(CreateAccount.for_themselves)


@given(actor_step("{actor:Actor} has signed up"))
def signed_up(cast: Cast, actor: str) -> None:
    cast.actor_named(actor).attempts_to(SignUp)


# ---------------------------------------------------------------------------
# When
# ---------------------------------------------------------------------------


@when(actor_step("{actor:Actor} activates their account"))
def activates_account(cast: Cast, actor: str) -> None:
    cast.actor_named(actor).attempts_to(ActivateAccount)


@when(actor_step("{actor:Actor} tries to sign in"))
def tries_to_sign_in(cast: Cast, actor: str) -> None:
    cast.actor_named(actor).attempts_to(SignIn)


@when(actor_step("{actor:Actor} creates a project"))
@when(actor_step("{actor:Actor} tries to create a project"))
def creates_project(cast: Cast, actor: str) -> None:
    cast.actor_named(actor).attempts_to(CreateProject.named(PROJECT_NAME))


# ---------------------------------------------------------------------------
# Then
# ---------------------------------------------------------------------------


@then(actor_step("{actor:Actor} should be authenticated"))
def should_be_authenticated(cast: Cast, actor: str) -> None:
    cast.actor_named(actor).attempts_to(check_that(IsAuthenticated, is_(True)))


@then(actor_step("{actor:Actor} should not be authenticated"))
def should_not_be_authenticated(cast: Cast, actor: str) -> None:
    cast.actor_named(actor).attempts_to(check_that(IsAuthenticated, is_(not_(True))))


@then(actor_step("{actor:Actor} should see an error telling them to activate the account"))
def should_see_activation_error(cast: Cast, actor: str) -> None:
    cast.actor_named(actor).attempts_to(
        check_that(AuthenticationError, matches_regexp("activate your account"))
    )


@then(actor_step("{actor:Actor} should see the project"))
def should_see_project(cast: Cast, actor: str) -> None:
    cast.actor_named(actor).attempts_to(
        check_that(ProjectsVisible, has_project_named(PROJECT_NAME))
    )


@then(actor_step("{actor:Actor} should not see any projects"))
def should_not_see_projects(cast: Cast, actor: str) -> None:
    cast.actor_named(actor).attempts_to(check_that(ProjectsVisible, empty()))
