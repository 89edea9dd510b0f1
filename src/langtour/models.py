"""Record type used by the walkthrough: a user with a few string tags."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass
class User:
    """A user with a name, an age, free-form tags, and an active flag.

    Build instances with :meth:`User.new`, which seeds the default
    ``role`` tag. The dataclass constructor stays available for tests
    that need a specific tag layout.
    """

    name: str
    age: int
    tags: dict[str, str] = field(default_factory=dict)
    active: bool = True

    @classmethod
    def new(cls, name: str, age: int) -> User:
        """Create an active user tagged with ``role=user``."""
        return cls(name=name, age=age, tags={"role": "user"})

    def describe(self) -> str:
        return f"{self.name} is {self.age} years old"

    def set_active(self, status: bool) -> None:
        self.active = status

    def get_tags(self) -> Mapping[str, str]:
        """Return a read-only live view over the user's tags."""
        return MappingProxyType(self.tags)


__all__ = ["User"]
