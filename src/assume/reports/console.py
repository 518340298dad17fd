"""Console rendering of assertion failures using Rich."""

from __future__ import annotations

import sys

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from assume.failure import AssertionFailure, Failure


_DIFF_STYLES = {"+": "green", "-": "red", "@": "cyan"}


class FailureRenderer:
    """Renders a :class:`Failure` as a Rich panel."""

    def __init__(self, console: Console | None = None, max_frames: int = 10) -> None:
        self.console = console or Console(file=sys.__stderr__)
        self.max_frames = max_frames

    def _frames(self, failure: Failure) -> list[Text]:
        lines: list[Text] = []
        for frame in failure.stack[: self.max_frames]:
            location = f"  [dim]{escape(frame.filename)}:{frame.lineno}[/dim] in [bold]{escape(frame.function)}[/bold]"
            lines.append(Text.from_markup(location))
            if frame.line:
                lines.append(Text(f"    {frame.line}"))
        hidden = len(failure.stack) - self.max_frames
        if hidden > 0:
            lines.append(Text(f"  ... {hidden} more frame(s)", style="dim"))
        return lines

    def _diff(self, failure: Failure) -> list[Text]:
        return [Text(line, style=_DIFF_STYLES.get(line[:1], "")) for line in failure.diff or []]

    def build(self, failure: Failure | AssertionFailure) -> Panel:
        if isinstance(failure, AssertionFailure):
            failure = failure.failure

        body: list[Text] = [Text(failure.message, style="bold red")]
        if failure.expectation and failure.expectation != failure.message:
            body.append(Text(f"expected {failure.expectation}", style="yellow"))
        if failure.stacktrace and failure.stack:
            body.append(Text(""))
            body.extend(self._frames(failure))
        if failure.diff:
            body.append(Text(""))
            body.extend(self._diff(failure))

        return Panel(Group(*body), title="[red]✗ Assertion failed[/red]", border_style="red", expand=False)

    def render(self, failure: Failure | AssertionFailure) -> None:
        self.console.print(self.build(failure))


def render_failure(failure: Failure | AssertionFailure, console: Console | None = None) -> None:
    """Print ``failure`` to ``console`` (stderr by default)."""
    FailureRenderer(console=console).render(failure)
