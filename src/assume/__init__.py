"""Assume - fluent, chainable assertions.

    from assume import expect

    expect([1, 2, 3]).to.include(2)
    expect("hello").to.not_.be.empty()
    expect({"a": [1]}).to.deep.equal({"a": [1]})
"""

from .chain import Chain, holds, new_chain
from .config import AssumeSettings, config_override, configure, get_settings, reset_settings
from .deep import set_deep_equal
from .entry import Entry, assume, expect, hope, sincerely
from .failure import AssertionFailure, Failure
from .predicates import Verdict, predicate
from .registry import register, register_linking_words, register_modifier
from .stack import StackFrame, set_stack_capture
from .version import __version__


__all__ = [
    # Entry points
    "assume",
    "expect",
    "hope",
    "sincerely",
    "new_chain",
    "holds",
    "Entry",
    "Chain",
    # Failures
    "AssertionFailure",
    "Failure",
    "StackFrame",
    # Extension
    "predicate",
    "register",
    "register_modifier",
    "register_linking_words",
    "Verdict",
    "set_deep_equal",
    "set_stack_capture",
    # Configuration
    "AssumeSettings",
    "configure",
    "config_override",
    "get_settings",
    "reset_settings",
    "__version__",
]
