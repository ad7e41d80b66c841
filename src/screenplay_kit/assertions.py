"""Bridge from questions to hamcrest matchers.

``check_that`` turns an assertion into an ordinary action, so checks run
through ``attempts_to`` alongside everything else an actor does.
"""

from __future__ import annotations

from typing import Any

from hamcrest import assert_that
from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import StringDescription

from .abilities import Abilities
from .actions import Action, describe
from .questions import Question


def check_that(question: Question[Any], matcher: Matcher[Any]) -> Action:
    """Action asserting that ``question`` currently satisfies ``matcher``.

    Raises ``AssertionError`` with hamcrest's expected/actual description
    when the match fails. Evaluating it never changes application state.
    """
    expectation = StringDescription().append_description_of(matcher)

    def check(abilities: Abilities) -> None:
        actual = question(abilities)
        who = abilities.name or "The actor"
        assert_that(actual, matcher, f"{who} checked {describe(question)}")

    return Action(f"check that {describe(question)} is {expectation}", check)
