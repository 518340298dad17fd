"""Tests for predicate, modifier and linking-word registration."""

import pytest

from assume import (
    AssertionFailure,
    Verdict,
    expect,
    new_chain,
    predicate,
    register,
    register_linking_words,
    register_modifier,
)
from assume.registry import (
    get_modifier,
    get_predicate,
    get_registry,
    restore_registry,
    snapshot_registry,
    split_aliases,
)


@pytest.mark.parametrize(
    "names, expected",
    [
        ("a, an", ("a", "an")),
        ("a,an", ("a", "an")),
        ("a | an  b", ("a", "an", "b")),
        ("single", ("single",)),
        (["x", " y "], ("x", "y")),
        ("", ()),
    ],
)
def test_split_aliases(names, expected):
    assert split_aliases(names) == expected


def test_every_alias_resolves_to_one_definition():
    defn = get_predicate("above")

    assert defn is not None
    for alias in ("above", "gt", "greater", "greater_than"):
        assert get_predicate(alias) is defn
    assert defn.arity == 1


def test_register_bool_predicate():
    @predicate("divisible_by, multiple_of")
    def divisible_by(chain, n):
        return chain.subject % n == 0

    expect(10).to.be.divisible_by(5)
    expect(10).to.not_.be.multiple_of(3)
    with pytest.raises(AssertionFailure) as info:
        expect(10).multiple_of(3)

    assert info.value.message == "Assertion failed"


def test_bool_predicate_accepts_trailing_message():
    register("odd_number", lambda chain: chain.subject % 2 == 1)

    with pytest.raises(AssertionFailure) as info:
        expect(2).odd_number("two is even")

    assert info.value.message == "two is even"


def test_register_verdict_predicate():
    def palindrome(chain):
        text = chain.subject
        return Verdict(passed=text == text[::-1], message=f"{text!r} is not a palindrome")

    register("palindrome", palindrome)

    expect("level").to.be.palindrome()
    with pytest.raises(AssertionFailure) as info:
        expect("levels").palindrome()
    assert info.value.message == "'levels' is not a palindrome"


def test_variadic_predicate_takes_message_by_keyword():
    register("one_of", lambda chain, *options: chain.subject in options)

    expect(2).one_of(1, 2, 3)
    with pytest.raises(AssertionFailure) as info:
        expect(5).one_of(1, 2, 3, msg="not an option")
    assert info.value.message == "not an option"


def test_last_registration_wins():
    register("registry_check", lambda chain: True)
    chain = new_chain(1)
    chain.registry_check()

    register("registry_check", lambda chain: False)

    with pytest.raises(AssertionFailure):
        chain.registry_check()
    with pytest.raises(AssertionFailure):
        new_chain(1).registry_check()


def test_register_requires_a_name():
    with pytest.raises(ValueError):
        register(" , ", lambda chain: True)


def test_register_linking_words():
    added = register_linking_words("certainly, indeed")

    assert added == ("certainly", "indeed")
    expect(1).certainly.indeed.equal(1)


def test_register_modifier():
    defn = register_modifier("loose", "loose, roughly")

    @predicate("near")
    def near(chain, value):
        tolerance = 1 if chain.flags["loose"] else 0
        return abs(chain.subject - value) <= tolerance

    chain = new_chain(10)

    assert get_modifier("roughly") is defn
    assert chain.flags["loose"] is False
    assert chain.loose is chain.roughly
    chain.roughly.near(11)
    with pytest.raises(AssertionFailure):
        chain.near(11)
    assert chain.loose.loose is chain.loose


def test_registry_names_cover_all_tables():
    names = get_registry().names()

    assert {"equal", "not_", "deep", "to"} <= names


class TestPredicatesCallingTest:
    @pytest.fixture(autouse=True)
    def positive(self):
        @predicate("positive")
        def positive(chain):
            return chain.test(chain.subject > 0, "not positive")

    def test_plain_and_negated(self):
        expect(1).to.be.positive()
        expect(-1).to.not_.be.positive()

        with pytest.raises(AssertionFailure) as info:
            expect(-1).to.be.positive()
        assert info.value.message == "not positive"

        with pytest.raises(AssertionFailure):
            expect(1).to.not_.be.positive()

    def test_returns_the_chain(self):
        chain = expect(1)

        assert chain.positive() is chain

    def test_caller_message_wins(self):
        with pytest.raises(AssertionFailure) as info:
            expect(-1).positive("must be positive")

        assert info.value.message == "must be positive"

    def test_stack_starts_at_caller(self):
        with pytest.raises(AssertionFailure) as info:
            expect(-1).positive()

        assert info.value.stack[0].function == "test_stack_starts_at_caller"

    def test_quiet_chains_return_bools(self):
        assert expect(1).quietly.positive() is True
        assert expect(-1).quietly.positive() is False
        assert expect(-1).quietly.not_.positive() is True


def test_snapshot_and_restore_registry():
    snapshot = snapshot_registry()
    register_modifier("scratch", "scratch")
    register_linking_words("scratchy")
    register("scratch_check", lambda chain: True)

    restore_registry(snapshot)

    assert get_modifier("scratch") is None
    assert get_predicate("scratch_check") is None
    assert "scratch" not in new_chain(1).flags
    assert not hasattr(new_chain(1), "scratchy")
