"""Entry points for building chains.

All of these produce identical chains:

    assume(value)
    assume.that(value)
    expect(value)
    expect.that(value)
    hope.that(value)
    sincerely.hope.that(value)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from assume.chain import Chain, new_chain


class Entry:
    """Callable chain factory with a readable ``that`` spelling."""

    def __init__(self, name: str, hope: "Entry | None" = None) -> None:
        self.__name__ = name
        self._hope = hope

    def __repr__(self) -> str:
        return f"<assume entry {self.__name__!r}>"

    def __call__(self, subject: Any, flags: Mapping[str, Any] | None = None, **options: Any) -> Chain:
        return new_chain(subject, flags, **options)

    def that(self, subject: Any, flags: Mapping[str, Any] | None = None, **options: Any) -> Chain:
        return new_chain(subject, flags, **options)

    @property
    def hope(self) -> "Entry":
        if self._hope is None:
            raise AttributeError(f"{self.__name__!r} has no 'hope' spelling")
        return self._hope


hope = Entry("hope")
assume = Entry("assume", hope=hope)
expect = Entry("expect", hope=hope)
sincerely = Entry("sincerely", hope=hope)
