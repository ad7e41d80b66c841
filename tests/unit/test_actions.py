"""Unit tests for the named actions."""

from unittest.mock import call

import pytest

from screenplay_kit import (
    Abilities,
    Action,
    ActivateAccount,
    Actor,
    CreateAccount,
    CreateProject,
    MissingAbilityError,
    Project,
    SignIn,
)
from screenplay_kit.actions import describe


@pytest.fixture
def bob(recording_driver):
    return Actor(Abilities(name="Bob", driver=recording_driver))


class TestNamedActions:
    """Each action performs exactly one driver interaction for its actor."""

    def test_create_account_for_themselves(self, bob, recording_driver):
        bob.attempts_to(CreateAccount.for_themselves)
        assert recording_driver.method_calls == [call.create_account("Bob")]

    def test_activate_account(self, bob, recording_driver):
        bob.attempts_to(ActivateAccount)
        assert recording_driver.method_calls == [call.activate_account("Bob")]

    def test_sign_in(self, bob, recording_driver):
        bob.attempts_to(SignIn)
        assert recording_driver.method_calls == [call.sign_in("Bob")]

    def test_actions_are_reusable_across_actors(self, recording_driver):
        """Actions only see the bundle, never a particular actor."""
        for name in ("Sue", "Tanya"):
            Actor(Abilities(name=name, driver=recording_driver)).attempts_to(SignIn)

        assert recording_driver.method_calls == [call.sign_in("Sue"), call.sign_in("Tanya")]


class TestCreateProject:
    """Tests for the parameterised CreateProject factory."""

    def test_named_captures_project_name(self, bob, recording_driver):
        """The returned action closes over the project name."""
        bob.attempts_to(CreateProject.named("a-project"))

        assert recording_driver.method_calls == [
            call.create_project("Bob", Project(name="a-project"))
        ]

    def test_each_factory_call_is_independent(self, bob, recording_driver):
        first = CreateProject.named("first")
        second = CreateProject.named("second")

        bob.attempts_to(second, first)

        assert [c.args[1].name for c in recording_driver.method_calls] == ["second", "first"]

    def test_description_mentions_project(self):
        assert describe(CreateProject.named("a-project")) == "create a project named 'a-project'"


class TestMissingAbilities:
    """Programmer errors surface immediately."""

    def test_action_without_driver_raises(self):
        with pytest.raises(MissingAbilityError) as exc_info:
            Actor(Abilities(name="Sue")).attempts_to(SignIn)

        assert exc_info.value.data["ability"] == "driver"

    def test_action_without_name_raises(self, recording_driver):
        with pytest.raises(MissingAbilityError):
            Actor(Abilities(driver=recording_driver)).attempts_to(CreateAccount.for_themselves)

        assert recording_driver.method_calls == []


class TestDescribe:
    """Tests for describe()."""

    def test_action_description(self):
        assert describe(SignIn) == "sign in"
        assert str(ActivateAccount) == "activate their account"

    def test_plain_function_uses_name(self):
        def wave(abilities):
            pass

        assert describe(wave) == "wave"

    def test_custom_action(self):
        seen = []
        wave = Action("wave", lambda abilities: seen.append(abilities.name))

        wave(Abilities(name="Sue"))

        assert seen == ["Sue"]
        assert describe(wave) == "wave"
