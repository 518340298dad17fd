"""Tests for the alternate entry points."""

import pytest

from assume import AssertionFailure, Chain, assume, expect, hope, new_chain, sincerely


ENTRIES = [
    assume,
    assume.that,
    expect,
    expect.that,
    hope.that,
    sincerely.hope.that,
    assume.hope.that,
    new_chain,
]


@pytest.mark.parametrize("entry", ENTRIES)
def test_entries_build_equivalent_chains(entry):
    chain = entry([1, 2, 3])

    assert isinstance(chain, Chain)
    assert chain.subject == [1, 2, 3]
    assert dict(chain.flags) == dict(new_chain([1, 2, 3]).flags)
    chain.includes(2).and_.has.length(3)
    with pytest.raises(AssertionFailure):
        entry([1, 2, 3]).includes(4)


def test_entries_forward_options():
    assert expect(1, negate=True).flags["negate"] is True
    assert assume.that(1, include_stack=False).include_stack is False


def test_hope_has_no_nested_hope():
    with pytest.raises(AttributeError):
        hope.hope


def test_entry_repr():
    assert repr(expect) == "<assume entry 'expect'>"
