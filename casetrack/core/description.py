"""Concrete test descriptions.

Follows the JUnit naming convention: a test is displayed as
``method(class)`` and a suite is displayed by its own name.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from .ports import TestDescription


@dataclass(frozen=True)
class Description(TestDescription):
    """Immutable TestDescription value.

    Equality and hashing only consider the display name and unique id,
    so two descriptions of the same test compare equal regardless of
    the children attached to them.
    """

    name: str
    uid: str
    class_name_: str = field(compare=False)
    method_name_: str | None = field(default=None, compare=False)
    children_: tuple[TestDescription, ...] = field(default=(), compare=False)

    @classmethod
    def create_test_description(
        cls, class_name: str, method_name: str
    ) -> "Description":
        """Describe a single test method of a class."""
        if not class_name or not class_name.strip():
            raise ValueError("class_name must be a non-empty string")
        if not method_name or not method_name.strip():
            raise ValueError("method_name must be a non-empty string")
        display_name = f"{method_name}({class_name})"
        return cls(
            name=display_name,
            uid=display_name,
            class_name_=class_name,
            method_name_=method_name,
        )

    @classmethod
    def create_suite_description(
        cls, name: str, children: Sequence[TestDescription] = ()
    ) -> "Description":
        """Describe a suite, or a test from a source without methods."""
        if not name or not name.strip():
            raise ValueError("name must be a non-empty string")
        return cls(
            name=name,
            uid=name,
            class_name_=name,
            children_=tuple(children),
        )

    def with_child(self, child: TestDescription) -> "Description":
        """Return a copy of this description with child appended."""
        return replace(self, children_=self.children_ + (child,))

    @property
    def unique_id(self) -> str:
        return self.uid

    @property
    def method_name(self) -> str | None:
        return self.method_name_

    @property
    def class_name(self) -> str:
        return self.class_name_

    @property
    def children(self) -> tuple[TestDescription, ...]:
        return self.children_

    @property
    def display_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name
