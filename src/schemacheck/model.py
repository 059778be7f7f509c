"""Result types produced by the schema validator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

ROOT_PATH = "root"


def display_path(path: str) -> str:
    """Return the reported path for a node, using ``root`` at the top."""
    return path or ROOT_PATH


def child_path(path: str, name: str) -> str:
    """Extend ``path`` with a property segment."""
    return f"{path}.{name}" if path else name


def index_path(path: str, index: int) -> str:
    """Extend ``path`` with an array index segment."""
    return f"{path}[{index}]" if path else f"[{index}]"


@dataclass(frozen=True)
class Violation:
    """One failed constraint at a located position in the data."""

    path: str
    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.path, str):
            raise ValueError("path must be a string")
        if not isinstance(self.message, str) or not self.message:
            raise ValueError("message must be a non-empty string")

    def render(self) -> str:
        return f"{self.path}: {self.message}"

    def to_item(self) -> dict[str, str]:
        return {"path": self.path, "message": self.message}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one data value against one schema."""

    violations: tuple[Violation, ...] = ()

    @classmethod
    def from_violations(cls, violations: Iterable[Violation]) -> "ValidationResult":
        return cls(violations=tuple(violations))

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def messages(self) -> list[str]:
        """Render every violation as ``"<path>: <message>"``."""
        return [violation.render() for violation in self.violations]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``{"isValid", "errors"}`` wire shape."""
        return {
            "isValid": self.is_valid,
            "errors": [violation.to_item() for violation in self.violations],
        }
