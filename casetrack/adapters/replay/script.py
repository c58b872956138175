"""Recorded event scripts for the replay adapter.

A script describes one test case and the notifications a test
framework sent about it, in the order they were sent. Scripts are JSON
documents validated with pydantic.
"""

import json
from pathlib import Path
from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)


class ScriptError(ValueError):
    """A replay script could not be read or is inconsistent."""


def _check_not_blank(value: str, field: str) -> str:
    if not value.strip():
        raise ValueError(f"{field} must not be blank")
    return value


class _Event(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class TransitionEvent(_Event):
    """A lifecycle notification without payload."""

    type: Literal["started", "finished", "skipped", "suppressed", "interrupted"]
    at: int = Field(ge=0, description="Epoch milliseconds of the notification")


class FailureEvent(_Event):
    """A failure of the whole test case."""

    type: Literal["failure"]
    at: int = Field(ge=0)
    message: str = ""
    error_type: str = Field(default="AssertionError", min_length=1)

    @field_validator("error_type")
    @classmethod
    def validate_error_type(cls, v: str) -> str:
        return _check_not_blank(v, "error_type")


class DynamicFailureEvent(_Event):
    """A failure of one dynamic test of the test case."""

    type: Literal["dynamic_failure"]
    at: int = Field(ge=0)
    child: str = Field(min_length=1, description="Name of the dynamic test")
    message: str = ""
    error_type: str = Field(default="AssertionError", min_length=1)

    @field_validator("error_type")
    @classmethod
    def validate_error_type(cls, v: str) -> str:
        return _check_not_blank(v, "error_type")


class PropertyEvent(_Event):
    """An exported property."""

    type: Literal["property", "repeated_property"]
    name: str = Field(min_length=1)
    value: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_not_blank(v, "name")


Event = Annotated[
    TransitionEvent | FailureEvent | DynamicFailureEvent | PropertyEvent,
    Field(discriminator="type"),
]


class CaseSpec(BaseModel):
    """Shape of the replayed test case."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    class_name: str = Field(min_length=1)
    method_name: str | None = None
    children: tuple[str, ...] = ()

    @field_validator("class_name", "method_name")
    @classmethod
    def validate_names(cls, v: str | None) -> str | None:
        """Names end up in test descriptions, which reject blank names."""
        if v is None:
            return v
        return _check_not_blank(v, "name")

    @field_validator("children")
    @classmethod
    def validate_children(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for child in v:
            _check_not_blank(child, "children names")
        return v

    @model_validator(mode="after")
    def check_unique_children(self) -> "CaseSpec":
        """Dynamic test names identify the tests; they must be unique."""
        if len(set(self.children)) != len(self.children):
            raise ValueError("children names must be unique")
        return self


class ReplayScript(BaseModel):
    """A test case and the events recorded for it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    suite: str = Field(min_length=1, description="Display name of the parent suite")
    test: CaseSpec
    events: tuple[Event, ...] = ()

    @field_validator("suite")
    @classmethod
    def validate_suite(cls, v: str) -> str:
        return _check_not_blank(v, "suite")

    @model_validator(mode="after")
    def check_dynamic_failures(self) -> "ReplayScript":
        """Every dynamic failure must name a declared child."""
        known = set(self.test.children)
        for event in self.events:
            if isinstance(event, DynamicFailureEvent) and event.child not in known:
                raise ValueError(f"dynamic_failure names unknown child '{event.child}'")
        return self


def parse_script(text: str) -> ReplayScript:
    """Parse a JSON replay script.

    Raises:
        ScriptError: If text is not valid JSON or not a valid script.
    """
    try:
        return ReplayScript.model_validate(json.loads(text))
    except json.JSONDecodeError as e:
        raise ScriptError(f"Invalid JSON: {e}") from e
    except ValidationError as e:
        raise ScriptError(f"Invalid replay script: {e}") from e


def load_script(path: str | Path) -> ReplayScript:
    """Read and parse the replay script at path.

    Raises:
        ScriptError: If the file cannot be read or parsed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ScriptError(f"Cannot read replay script {path}: {e}") from e
    return parse_script(text)
