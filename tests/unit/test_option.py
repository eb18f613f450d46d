"""Unit tests for the Option type."""

from __future__ import annotations

import pytest

from resultkit import (
    Nothing,
    OptionEmptyError,
    ResultKitError,
    Some,
    from_nullable,
    is_option,
    none,
    some,
)

pytestmark = pytest.mark.unit


def test_constructors():
    assert some(1) == Some(1)
    assert none() == Nothing()
    assert from_nullable(1) == Some(1)
    assert from_nullable(None) == Nothing()
    assert from_nullable(0) == Some(0)


def test_some_keeps_none_as_a_value():
    assert some(None).is_some()
    assert some(None).take_if_not_none() == none()


def test_tag_queries():
    assert some(1).is_some() and not some(1).is_none()
    assert none().is_none() and not none().is_some()
    assert is_option(some(1)) and is_option(none())
    assert not is_option(1)


def test_map():
    assert some(1).map(lambda x: x + 1) == some(2)
    assert none().map(lambda x: x + 1) == none()


def test_flat_map():
    assert some(1).flat_map(lambda x: some(x + 1)) == some(2)
    assert some(1).flat_map(lambda x: none()) == none()
    assert none().flat_map(lambda x: some(x + 1)) == none()


def test_extraction_on_some():
    assert some(1).or_default(2) == 1
    assert some(1).or_build(lambda: 2) == 1
    assert some(1).or_raise() == 1
    assert some(1).or_none() == 1


def test_extraction_on_nothing():
    assert none().or_default(2) == 2
    assert none().or_build(lambda: 2) == 2
    assert none().or_none() is None


def test_or_raise_on_nothing():
    with pytest.raises(OptionEmptyError, match="Option is empty") as exc_info:
        none().or_raise()
    assert isinstance(exc_info.value, ResultKitError)

    with pytest.raises(KeyError):
        none().or_raise(lambda: KeyError("missing"))


def test_take_if():
    assert some(1).take_if(lambda x: x > 5) == none()
    assert some(10).take_if(lambda x: x > 5) == some(10)
    assert none().take_if(lambda x: True) == none()


def test_take_if_not_none():
    assert some(1).take_if_not_none() == some(1)
    assert none().take_if_not_none() == none()


def test_if_present_and_if_absent():
    seen: list[object] = []
    present = some(1)
    absent = none()

    assert present.if_present(seen.append) is present
    assert present.if_absent(lambda: seen.append("absent")) is present
    assert absent.if_present(seen.append) is absent
    assert absent.if_absent(lambda: seen.append("absent")) is absent

    assert seen == [1, "absent"]


def test_and_or():
    assert some(1).and_(some(2)) == some(2)
    assert some(1).and_(none()) == none()
    assert none().and_(some(2)) == none()
    assert some(1).or_(some(2)) == some(1)
    assert none().or_(some(2)) == some(2)
    assert none().or_(none()) == none()


def test_iteration_yields_at_most_one_element():
    present = some("x")
    assert list(present) == ["x"]
    assert list(present) == ["x"]  # each iter() starts fresh
    assert list(none()) == []
    assert len(present) == 1
    assert len(none()) == 0


def test_truthiness_follows_presence():
    assert some(0)
    assert not none()


def test_pattern_matching():
    def describe(option):
        match option:
            case Some(value):
                return f"some:{value}"
            case Nothing():
                return "nothing"

    assert describe(some(1)) == "some:1"
    assert describe(none()) == "nothing"


def test_immutability():
    with pytest.raises(AttributeError):
        some(1).value = 2  # type: ignore[misc]
