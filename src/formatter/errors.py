"""Formatter exceptions."""

from typing import Optional


class PipelineFailure(RuntimeError):
    """Raised inside the pipeline when input, options or a step fails.

    Caught once by StringFormatter.format_detailed; never reaches callers.

    Args:
        step: Name of the failing step, or "input" / "options".
        message: Human-readable description.
    """

    def __init__(self, step: str, message: Optional[str] = None):
        self.step = step
        super().__init__(message or f"Step '{step}' failed")
