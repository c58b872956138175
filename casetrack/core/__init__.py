"""Core domain logic for the casetrack result model.

This package contains zero external dependencies and represents
the tracking logic itself. The replay CLI and other integrations are
handled by the adapters package.
"""

from .description import Description
from .models import TestInterval, TestResult, TestStatus
from .ports import (
    PropertyExporterCallback,
    SuiteNodePort,
    TestDescription,
    TestNode,
)
from .test_case_node import State, TestCaseNode

__all__ = [
    "Description",
    "PropertyExporterCallback",
    "State",
    "SuiteNodePort",
    "TestCaseNode",
    "TestDescription",
    "TestInterval",
    "TestNode",
    "TestResult",
    "TestStatus",
]
