"""Tests for chain construction, linking words and modifiers."""

import pytest

from assume import AssertionFailure, Chain, configure, expect, holds, new_chain


class TestConstruction:
    def test_flags_default_to_false(self):
        chain = new_chain(1)

        assert chain.subject == 1
        assert chain.flags["negate"] is False
        assert chain.flags["deep"] is False

    def test_flags_are_coerced_to_bool(self):
        chain = new_chain(1, {"negate": 1, "deep": ""})

        assert chain.flags["negate"] is True
        assert chain.flags["deep"] is False

    def test_flags_accept_keywords(self):
        chain = new_chain(1, deep="yes")

        assert chain.flags["deep"] is True

    def test_include_options_default_from_config(self):
        configure(include_stack=False, include_diff=False)
        chain = new_chain(1)

        assert chain.include_stack is False
        assert chain.include_diff is False

    def test_include_options_override_config(self):
        configure(include_stack=False)

        assert new_chain(1, include_stack=True).include_stack is True
        assert new_chain(1, {"include_stack": True}).include_stack is True
        assert "include_stack" not in new_chain(1, {"include_stack": True}).flags

    def test_chain_is_immutable(self):
        chain = new_chain(1)

        with pytest.raises(AttributeError):
            chain.subject = 2
        with pytest.raises(AttributeError):
            del chain.flags

        with pytest.raises(TypeError):
            chain.flags["negate"] = True

    def test_unknown_attribute_raises_attribute_error(self):
        chain = new_chain(1)

        assert not hasattr(chain, "definitely_not_registered")
        with pytest.raises(AttributeError):
            chain._private_name

    def test_dir_lists_registered_names(self):
        names = dir(new_chain(1))

        assert "equal" in names
        assert "not_" in names
        assert "to" in names

    def test_repr_shows_active_flags(self):
        assert repr(new_chain(1).not_.deep) == "<Chain subject=1 flags=[negate, deep]>"


class TestLinkingWords:
    def test_linking_words_return_fresh_continuation(self):
        chain = new_chain([1, 2])
        continuation = chain.to.be.that

        assert isinstance(continuation, Chain)
        assert continuation is not chain
        assert continuation.subject is chain.subject
        assert dict(continuation.flags) == dict(chain.flags)

    def test_linking_words_preserve_modifiers(self):
        chain = new_chain(5).not_.to.be

        assert chain.flags["negate"] is True
        chain.above(10)

    def test_keyword_spellings(self):
        chain = new_chain(1)

        assert dict(chain.is_.flags) == dict(chain.flags)
        assert getattr(chain, "is").subject == 1
        assert chain.and_.with_.has.have.been.at.of.same.does.which.subject == 1

    def test_linking_words_do_not_change_verdicts(self):
        expect(3).to.be.that.above(2)
        with pytest.raises(AssertionFailure):
            expect(3).to.be.that.above(5)


class TestModifiers:
    def test_all_negation_aliases_share_one_chain(self):
        chain = new_chain(1)

        assert chain.not_ is chain.dont
        assert chain.dont is chain.doesnt
        assert getattr(chain, "not") is chain.not_

    def test_negation_sets_only_negate(self):
        chain = new_chain(1).deep
        negated = chain.not_

        assert negated.flags["negate"] is True
        assert negated.flags["deep"] is True
        assert negated.subject == 1

    def test_double_negation_returns_original_chain(self):
        chain = new_chain(1)

        assert chain.not_.not_ is chain
        assert chain.not_.not_.flags["negate"] is False

    def test_double_negation_on_negated_root(self):
        chain = new_chain(1, negate=True)
        cleared = chain.not_

        assert cleared.flags["negate"] is False
        assert cleared.not_ is chain

    def test_deep_is_idempotent(self):
        chain = new_chain({"a": 1}).deep

        assert chain.deep is chain

    def test_branches_from_one_chain_do_not_interfere(self):
        negated = new_chain(5).not_

        negated.above(10)
        negated.deep.equal(6)
        with pytest.raises(AssertionFailure):
            negated.below(10)

        assert negated.flags["deep"] is False

    def test_predicate_methods_are_cached_per_chain(self):
        chain = new_chain(1)

        assert chain.equal is chain.equal
        assert chain.equal.definition is chain.eq.definition


class TestQuietChains:
    def test_quiet_chains_return_bools(self):
        assert expect(5).quietly.above(3) is True
        assert expect(5).quietly.above(10) is False

    def test_quiet_chains_respect_negation(self):
        assert expect(5).quietly.not_.above(10) is True
        assert expect(5).not_.quietly.above(3) is False

    def test_holds_builds_quiet_root(self):
        assert holds([]).a("array") is True
        assert holds({}).a("array") is False
        assert holds(1).raises is False
