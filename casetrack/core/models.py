"""Domain models for the casetrack result model.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class TestInterval:
    """Wall-clock period of a test, in epoch milliseconds."""

    __test__ = False

    start_millis: int
    end_millis: int

    def __post_init__(self) -> None:
        """Validate interval invariants on creation."""
        if self.end_millis < self.start_millis:
            raise ValueError(
                f"end_millis ({self.end_millis}) cannot be before "
                f"start_millis ({self.start_millis})"
            )

    def with_end_millis(self, end_millis: int) -> "TestInterval":
        """Return a copy of this interval ending at end_millis."""
        return TestInterval(self.start_millis, end_millis)

    @property
    def run_time_millis(self) -> int:
        return self.end_millis - self.start_millis

    @property
    def start_date(self) -> datetime:
        """Start of the interval as an aware UTC datetime."""
        return datetime.fromtimestamp(self.start_millis / 1000, tz=UTC)


class TestStatus(Enum):
    """Outcome category of a test once its execution is over.

    - FILTERED: Excluded by a test filter, never scheduled
    - CANCELLED: Stopped before it started
    - INTERRUPTED: Stopped while it was running
    - SKIPPED: Never ran, or skipped itself after starting
    - SUPPRESSED: Ignored by the test framework
    - COMPLETED: Ran to the end (with or without failures)
    """

    __test__ = False

    FILTERED = "filtered"
    CANCELLED = "cancelled"
    INTERRUPTED = "interrupted"
    SKIPPED = "skipped"
    SUPPRESSED = "suppressed"
    COMPLETED = "completed"

    @property
    def was_run(self) -> bool:
        """Whether a test with this status actually executed its body."""
        return self in {TestStatus.INTERRUPTED, TestStatus.COMPLETED}


@dataclass(frozen=True)
class TestResult:
    """Rendered outcome of a test node.

    Built by a node on request and never mutated afterwards. Mutable
    collections handed to the constructor are frozen in __post_init__.
    """

    __test__ = False

    name: str
    class_name: str
    properties: Mapping[str, str]  # converted to proxy in __post_init__
    failures: tuple[BaseException, ...]
    run_time_interval: TestInterval | None
    status: TestStatus
    num_tests: int
    num_failures: int
    child_results: tuple["TestResult", ...] = ()

    def __post_init__(self) -> None:
        """Freeze collections and validate counts."""
        if not isinstance(self.properties, MappingProxyType):
            object.__setattr__(
                self, "properties", MappingProxyType(dict(self.properties))
            )
        if not isinstance(self.failures, tuple):
            object.__setattr__(self, "failures", tuple(self.failures))
        if not isinstance(self.child_results, tuple):
            object.__setattr__(self, "child_results", tuple(self.child_results))

        if self.num_tests < 0:
            raise ValueError(f"num_tests must be non-negative, got {self.num_tests}")
        if self.num_failures < 0:
            raise ValueError(
                f"num_failures must be non-negative, got {self.num_failures}"
            )

    @property
    def was_run(self) -> bool:
        return self.status.was_run

    def to_dict(self) -> dict[str, Any]:
        """Render this result tree into JSON-compatible primitives."""
        interval = self.run_time_interval
        return {
            "name": self.name,
            "class_name": self.class_name,
            "status": self.status.value,
            "properties": dict(self.properties),
            "failures": [
                {"type": type(failure).__name__, "message": str(failure)}
                for failure in self.failures
            ],
            "run_time_interval": (
                None
                if interval is None
                else {
                    "start_millis": interval.start_millis,
                    "end_millis": interval.end_millis,
                }
            ),
            "num_tests": self.num_tests,
            "num_failures": self.num_failures,
            "child_results": [child.to_dict() for child in self.child_results],
        }
