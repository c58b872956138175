"""Replays recorded event scripts into a TestCaseNode.

The player stands in for a test framework: it builds descriptions for
the scripted test case and its dynamic tests, then delivers every
event to a fresh TestCaseNode in script order.
"""

import builtins
import logging

from casetrack.core.description import Description
from casetrack.core.ports import SuiteNodePort, TestDescription
from casetrack.core.test_case_node import (
    DEFAULT_INITIAL_INDEX_FOR_REPEATED_PROPERTY,
    TestCaseNode,
)

from .script import (
    CaseSpec,
    DynamicFailureEvent,
    FailureEvent,
    PropertyEvent,
    ReplayScript,
    TransitionEvent,
)

logger = logging.getLogger(__name__)


class RecordedFailure(Exception):
    """Failure of a type that is not a Python builtin exception."""


class ReplaySuite(SuiteNodePort):
    """Parent suite of a replayed test case."""

    def __init__(self, name: str, test: TestDescription):
        self._description = Description.create_suite_description(name, (test,))

    @property
    def description(self) -> TestDescription:
        return self._description


def build_description(case: CaseSpec) -> Description:
    """Describe the scripted test case, including its dynamic tests."""
    if case.method_name is None:
        description = Description.create_suite_description(case.class_name)
    else:
        description = Description.create_test_description(
            case.class_name, case.method_name
        )
    for child in case.children:
        description = description.with_child(
            Description.create_test_description(description.display_name, child)
        )
    return description


def make_failure(error_type: str, message: str) -> BaseException:
    """Instantiate a failure named error_type carrying message.

    Builtin exception names give the builtin type; any other name, or a
    builtin whose constructor needs more than a message (such as
    UnicodeDecodeError), gives a RecordedFailure subclass of that name.
    """
    exc_type = getattr(builtins, error_type, None)
    if isinstance(exc_type, type) and issubclass(exc_type, BaseException):
        try:
            return exc_type(message)
        except TypeError:
            logger.debug(f"{error_type} cannot be built from a message alone")
    return type(error_type, (RecordedFailure,), {})(message)


class ScriptPlayer:
    """Drives a TestCaseNode through a ReplayScript."""

    def __init__(
        self,
        initial_index_for_repeated_property: int = DEFAULT_INITIAL_INDEX_FOR_REPEATED_PROPERTY,
    ):
        """Initialize the player.

        Args:
            initial_index_for_repeated_property: Passed on to every node
                the player creates.
        """
        self.initial_index_for_repeated_property = initial_index_for_repeated_property

    def play(self, script: ReplayScript) -> TestCaseNode:
        """Replay script into a new node and return the node."""
        description = build_description(script.test)
        node = TestCaseNode(
            description,
            ReplaySuite(script.suite, description),
            self.initial_index_for_repeated_property,
        )
        children = {child.method_name: child for child in description.children}

        logger.info(
            f"Replaying {len(script.events)} events for {description.display_name}"
        )
        for event in script.events:
            if isinstance(event, PropertyEvent):
                name = self._export(node, event)
                logger.debug(f"{event.type}: exported {name}")
                continue
            applied = self._apply(node, event, children)
            logger.debug(f"{event.type}: {'applied' if applied else 'ignored'}")
        return node

    @staticmethod
    def _apply(
        node: TestCaseNode,
        event: TransitionEvent | FailureEvent | DynamicFailureEvent,
        children: dict[str | None, TestDescription],
    ) -> bool:
        """Deliver one event; return whether it changed the node's state."""
        if isinstance(event, TransitionEvent):
            if event.type == "started":
                return node.started(event.at)
            if event.type == "finished":
                return node.finished(event.at)
            if event.type == "skipped":
                return node.test_skipped(event.at)
            if event.type == "suppressed":
                return node.test_suppressed(event.at)
            return node.test_interrupted(event.at)

        if isinstance(event, FailureEvent):
            return node.test_failure(
                make_failure(event.error_type, event.message), event.at
            )

        return node.dynamic_test_failure(
            children[event.child],
            make_failure(event.error_type, event.message),
            event.at,
        )

    @staticmethod
    def _export(node: TestCaseNode, event: PropertyEvent) -> str:
        """Deliver one property; return the name it was stored under."""
        if event.type == "repeated_property":
            return node.export_repeated_property(event.name, event.value)
        node.export_property(event.name, event.value)
        return event.name
