"""Human-readable rendering of assertion failures."""

from assume.reports.console import FailureRenderer, render_failure

__all__ = ["FailureRenderer", "render_failure"]
