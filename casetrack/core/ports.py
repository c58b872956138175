"""Port interfaces for the casetrack result model.

These abstract base classes define the boundaries between the core
tracking logic and the test framework that drives it.

Port Interface Categories:

1. **Driven Ports** (core reads from collaborators it does not own)
   - TestDescription: Identity and shape of a test
   - SuiteNodePort: The suite a test case belongs to

2. **Driving Ports** (the running framework calls into core)
   - TestNode: Lifecycle notifications and result building
   - PropertyExporterCallback: Properties exported by a running test
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .models import TestResult


# ============================================================================
# DRIVEN PORTS (Core reads from collaborators)
# ============================================================================


class TestDescription(ABC):
    """Identity of a test or suite as seen by the tracker.

    Implementations must be hashable and compare equal when they
    describe the same test, since descriptions are used as keys for
    dynamic test failures.
    """

    __test__ = False

    @property
    @abstractmethod
    def unique_id(self) -> str:
        """Stable identity of the described test."""

    @property
    @abstractmethod
    def method_name(self) -> str | None:
        """Name of the test method.

        None for descriptions created as suites, which is how some
        non-JUnit sources describe their leaf tests.
        """

    @property
    @abstractmethod
    def class_name(self) -> str:
        """Name of the class (or suite) owning the test."""

    @property
    @abstractmethod
    def children(self) -> Sequence["TestDescription"]:
        """Child descriptions, in enumeration order."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name of the described test."""

    @property
    def is_test(self) -> bool:
        """Whether this describes a single test rather than a container."""
        return not self.children

    @property
    def is_suite(self) -> bool:
        return not self.is_test


class SuiteNodePort(ABC):
    """The suite node a test case is attached to.

    The tracker only ever reads the suite's description, to name tests
    whose own description carries no method name.
    """

    @property
    @abstractmethod
    def description(self) -> TestDescription:
        """Description of the suite."""


# ============================================================================
# DRIVING PORTS (The framework calls into core)
# ============================================================================


class PropertyExporterCallback(ABC):
    """Receiver of properties exported by a running test."""

    @abstractmethod
    def export_property(self, name: str, value: str) -> None:
        """Record a property, replacing any earlier value under name."""

    @abstractmethod
    def export_repeated_property(self, name: str, value: str) -> str:
        """Record a property that may be exported many times.

        Returns:
            The indexed name the value was stored under.
        """


class TestNode(ABC):
    """A node in the test suite model.

    Lifecycle methods take the time of the event in epoch milliseconds
    and return True when the notification moved the node to a new
    state. Notifications that do not apply to the current state are
    ignored.
    """

    __test__ = False

    def __init__(self, description: TestDescription):
        self._description = description

    @property
    def description(self) -> TestDescription:
        return self._description

    @property
    @abstractmethod
    def is_test_case(self) -> bool:
        """Whether this node is a leaf representing one test case."""

    @property
    @abstractmethod
    def children(self) -> Sequence["TestNode"]:
        """Child nodes of this node."""

    @abstractmethod
    def test_interrupted(self, now: int) -> bool:
        """The test was stopped from outside (e.g. by a timeout)."""

    @abstractmethod
    def test_skipped(self, now: int) -> bool:
        """The test skipped itself after starting."""

    @abstractmethod
    def test_suppressed(self, now: int) -> bool:
        """The test was ignored by the framework and never started."""

    @abstractmethod
    def test_failure(self, failure: BaseException, now: int) -> bool:
        """The test as a whole failed with failure."""

    @abstractmethod
    def dynamic_test_failure(
        self, test: TestDescription, failure: BaseException, now: int
    ) -> bool:
        """A dynamic test spawned by this node failed with failure."""

    @abstractmethod
    def build_result(self) -> TestResult:
        """Render the current state of this node into a TestResult."""
