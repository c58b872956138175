"""Tests for TestCaseNode result building and property export."""

import pytest

from casetrack.core.description import Description
from casetrack.core.models import TestInterval, TestStatus
from casetrack.core.test_case_node import TestCaseNode
from casetrack.tests.fakes import FakeSuiteNode, FakeTestDescription

CLASS_NAME = "com.example.CalculatorTest"


@pytest.fixture
def suite() -> FakeSuiteNode:
    return FakeSuiteNode(CLASS_NAME)


@pytest.fixture
def leaf() -> Description:
    return Description.create_test_description(CLASS_NAME, "testAdd")


@pytest.fixture
def node(leaf: Description, suite: FakeSuiteNode) -> TestCaseNode:
    return TestCaseNode(leaf, suite)


@pytest.fixture
def dynamic_tests(leaf: Description) -> tuple[Description, ...]:
    return tuple(
        Description.create_test_description(leaf.display_name, f"case[{i}]")
        for i in range(3)
    )


@pytest.fixture
def dynamic_node(
    leaf: Description, dynamic_tests: tuple[Description, ...], suite: FakeSuiteNode
) -> TestCaseNode:
    description = leaf
    for test in dynamic_tests:
        description = description.with_child(test)
    return TestCaseNode(description, suite)


# ============================================================================
# Plain test cases
# ============================================================================


def test_result_without_notifications(node: TestCaseNode) -> None:
    result = node.build_result()

    assert result.name == "testAdd"
    assert result.class_name == CLASS_NAME
    assert result.status is TestStatus.SKIPPED
    assert result.run_time_interval is None
    assert result.num_tests == 1
    assert result.num_failures == 0
    assert result.failures == ()
    assert result.child_results == ()
    assert dict(result.properties) == {}


def test_result_of_passing_test(node: TestCaseNode) -> None:
    node.started(1000)
    node.finished(1500)

    result = node.build_result()

    assert result.status is TestStatus.COMPLETED
    assert result.run_time_interval == TestInterval(1000, 1500)
    assert result.num_failures == 0


def test_result_of_failing_test(node: TestCaseNode) -> None:
    first = AssertionError("expected 2")
    second = AssertionError("expected 3")
    node.started(1000)
    node.test_failure(first, 1100)
    node.test_failure(second, 1200)
    node.finished(1500)

    result = node.build_result()

    assert result.failures == (first, second)
    assert result.status is TestStatus.COMPLETED
    assert result.num_failures == result.num_tests == 1


def test_duplicate_failures_are_kept(node: TestCaseNode) -> None:
    failure = AssertionError("flaky")
    node.test_failure(failure, 100)
    node.test_failure(failure, 100)

    assert node.build_result().failures == (failure, failure)


def test_result_is_not_cached(node: TestCaseNode) -> None:
    before = node.build_result()
    node.started(100)
    after = node.build_result()

    assert before.status is TestStatus.SKIPPED
    assert after.status is TestStatus.INTERRUPTED
    assert before is not after


def test_result_does_not_change_node(node: TestCaseNode) -> None:
    node.started(100)
    node.build_result()
    node.build_result()

    assert node.finished(200)


def test_suite_shaped_description_uses_parent_name(suite: FakeSuiteNode) -> None:
    description = Description.create_suite_description("renders the page")
    node = TestCaseNode(description, suite)

    result = node.build_result()

    assert result.name == "renders the page"
    assert result.class_name == CLASS_NAME
    assert suite.description_calls == 1


def test_method_description_does_not_read_parent(
    node: TestCaseNode, suite: FakeSuiteNode
) -> None:
    node.build_result()
    assert suite.description_calls == 0


# ============================================================================
# Dynamic tests
# ============================================================================


def test_dynamic_children_without_failures(dynamic_node: TestCaseNode) -> None:
    dynamic_node.started(100)
    dynamic_node.finished(400)

    result = dynamic_node.build_result()

    assert result.num_tests == 3
    assert result.num_failures == 0
    assert [child.name for child in result.child_results] == [
        f"case[{i}](testAdd({CLASS_NAME}))" for i in range(3)
    ]
    for child in result.child_results:
        assert child.class_name == f"testAdd({CLASS_NAME})"
        assert child.run_time_interval == TestInterval(100, 400)
        assert child.status is TestStatus.COMPLETED
        assert child.num_tests == 1
        assert child.num_failures == 0
        assert dict(child.properties) == {}
        assert child.child_results == ()


def test_dynamic_failure_on_one_child(
    dynamic_node: TestCaseNode, dynamic_tests: tuple[Description, ...]
) -> None:
    failure = AssertionError("case 1 broke")
    dynamic_node.started(100)
    dynamic_node.dynamic_test_failure(dynamic_tests[1], failure, 200)
    dynamic_node.finished(400)

    result = dynamic_node.build_result()

    assert result.num_tests == 3
    assert result.num_failures == 1
    assert result.failures == ()
    first, second, third = result.child_results
    assert first.failures == () and first.num_failures == 0
    assert second.failures == (failure,) and second.num_failures == 1
    assert third.failures == () and third.num_failures == 0


def test_dynamic_failures_count_distinct_children(
    dynamic_node: TestCaseNode, dynamic_tests: tuple[Description, ...]
) -> None:
    dynamic_node.started(100)
    dynamic_node.dynamic_test_failure(dynamic_tests[0], AssertionError("a"), 110)
    dynamic_node.dynamic_test_failure(dynamic_tests[0], AssertionError("b"), 120)
    dynamic_node.dynamic_test_failure(dynamic_tests[2], AssertionError("c"), 130)

    result = dynamic_node.build_result()

    assert result.num_failures == 2
    assert len(result.child_results[0].failures) == 2


def test_global_failure_fails_every_child(dynamic_node: TestCaseNode) -> None:
    failure = RuntimeError("fixture exploded")
    dynamic_node.started(100)
    dynamic_node.test_failure(failure, 150)
    dynamic_node.finished(200)

    result = dynamic_node.build_result()

    assert result.failures == (failure,)
    assert result.num_failures == result.num_tests == 3
    for child in result.child_results:
        assert child.num_failures == 1
        assert child.failures == ()


def test_dynamic_failure_matched_by_equal_description(
    dynamic_node: TestCaseNode,
) -> None:
    # A framework may hand back a fresh but equal description object.
    same_test = Description.create_test_description(
        f"testAdd({CLASS_NAME})", "case[2]"
    )
    dynamic_node.dynamic_test_failure(same_test, AssertionError("late"), 100)

    result = dynamic_node.build_result()

    assert result.child_results[2].num_failures == 1


def test_dynamic_failure_for_unlisted_test_is_counted(
    node: TestCaseNode,
) -> None:
    unlisted = FakeTestDescription("case[9]")
    node.dynamic_test_failure(unlisted, AssertionError("orphan"), 100)

    result = node.build_result()

    assert result.child_results == ()
    assert result.num_failures == 1


def test_dynamic_children_with_fake_descriptions(suite: FakeSuiteNode) -> None:
    children = [FakeTestDescription(f"row {i}") for i in range(2)]
    description = FakeTestDescription(
        "testRows", class_name=CLASS_NAME, method_name="testRows", children=children
    )
    node = TestCaseNode(description, suite)
    node.dynamic_test_failure(FakeTestDescription("row 1"), AssertionError("x"), 10)

    result = node.build_result()

    assert [child.name for child in result.child_results] == ["row 0", "row 1"]
    assert [child.class_name for child in result.child_results] == ["testRows"] * 2
    assert [child.num_failures for child in result.child_results] == [0, 1]


# ============================================================================
# Properties
# ============================================================================


def test_export_property(node: TestCaseNode) -> None:
    node.export_property("owner", "team-a")
    assert dict(node.build_result().properties) == {"owner": "team-a"}


def test_export_property_last_write_wins(node: TestCaseNode) -> None:
    node.export_property("owner", "team-a")
    node.export_property("owner", "team-b")

    assert dict(node.build_result().properties) == {"owner": "team-b"}


def test_export_repeated_property(node: TestCaseNode) -> None:
    names = [node.export_repeated_property("metric", str(v)) for v in (10, 20, 30)]

    assert names == ["metric1", "metric2", "metric3"]
    assert dict(node.build_result().properties) == {
        "metric1": "10",
        "metric2": "20",
        "metric3": "30",
    }


def test_repeated_property_counts_per_name(node: TestCaseNode) -> None:
    assert node.export_repeated_property("a", "x") == "a1"
    assert node.export_repeated_property("b", "x") == "b1"
    assert node.export_repeated_property("a", "y") == "a2"


def test_repeated_property_initial_index(leaf: Description, suite: FakeSuiteNode) -> None:
    node = TestCaseNode(leaf, suite, initial_index_for_repeated_property=0)

    assert node.export_repeated_property("metric", "1") == "metric0"
    assert node.export_repeated_property("metric", "2") == "metric1"


def test_properties_snapshot_is_independent(node: TestCaseNode) -> None:
    node.export_property("owner", "team-a")
    result = node.build_result()
    node.export_property("owner", "team-b")

    assert result.properties["owner"] == "team-a"


def test_properties_exported_in_any_state(node: TestCaseNode) -> None:
    node.started(100)
    node.finished(200)
    node.export_property("late", "yes")

    assert node.build_result().properties["late"] == "yes"
