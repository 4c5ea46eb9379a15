"""Test-runner side of an assertion: something with a name that can be failed."""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """The runner collaborator an assertion reports to.

    ``error`` receives the fully formatted failure table and must mark the
    test as failed without stopping it.
    """

    name: str

    def error(self, message: str) -> None: ...


@dataclass
class RecordingReporter:
    """Reporter that keeps every failure message in memory.

    Attributes:
        name: Test name printed in the ``Test:`` row.
        errors: Failure tables in the order they were reported.
    """

    name: str = "test"
    errors: list[str] = field(default_factory=list)

    def error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def failed(self) -> bool:
        return bool(self.errors)
