"""
Violation reporting for consistency checks.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterable, List, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Violation:
    """A single field-scoped consistency failure."""
    path: str
    code: str
    message: str
    params: Dict[str, Any] = field(default_factory=dict, compare=False)

    def with_prefix(self, prefix: str) -> 'Violation':
        """Return a copy whose path is nested under prefix."""
        path = f"{prefix}.{self.path}" if self.path else prefix
        return Violation(path=path, code=self.code, message=self.message, params=dict(self.params))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'code': self.code,
            'message': self.message,
            'params': {k: str(v) for k, v in self.params.items()},
        }


class Validator(ABC, Generic[T]):
    """Checks a subject and reports every violation found."""

    @abstractmethod
    def validate(self, subject: T) -> List[Violation]:
        """Return all violations; an empty list means valid."""
        pass

    def is_valid(self, subject: T) -> bool:
        return not self.validate(subject)


def violations_on(violations: Iterable[Violation], path: str) -> List[Violation]:
    """Filter violations by path."""
    return [v for v in violations if v.path == path]
