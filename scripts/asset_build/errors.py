"""Exceptions raised by build tasks."""


class BuildError(Exception):
    """A build task could not complete (missing input, compile failure)."""

    def __init__(self, message: str, task: str | None = None):
        super().__init__(message)
        self.task = task

    def __str__(self) -> str:
        message = super().__str__()
        return f"[{self.task}] {message}" if self.task else message
