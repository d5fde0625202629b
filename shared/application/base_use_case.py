"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar, Optional

from shared.domain.validation import Violation

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Result wrapper for use cases."""
    success: bool
    data: Optional[OutputDTO] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    violations: List[Violation] = field(default_factory=list)

    @classmethod
    def ok(cls, data: OutputDTO, violations: List[Violation] = None) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result, optionally carrying non-blocking violations."""
        return cls(success=True, data=data, violations=list(violations or []))

    @classmethod
    def fail(cls, error: str, error_code: str = None) -> 'UseCaseResult[OutputDTO]':
        """Create a failed result."""
        return cls(success=False, error=error, error_code=error_code)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass
