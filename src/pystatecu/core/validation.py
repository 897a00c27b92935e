"""
Validation results for StateCU records.

Validators never raise on bad data; they return a
:class:`ComponentValidation` holding one
:class:`ComponentValidationProblem` per issue found.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from pystatecu.core.data import is_missing
from pystatecu.core.exceptions import ValidationError


def is_out_of_range(
    value: float | int | None,
    low: float | None = None,
    high: float | None = None,
    *,
    low_exclusive: bool = False,
    complete: bool = False,
) -> bool:
    """Return ``True`` if *value* should be reported as invalid.

    Missing values are only reported when *complete* is ``True``.
    """
    if is_missing(value):
        return complete
    if low is not None:
        if value < low or (low_exclusive and value == low):
            return True
    if high is not None and value > high:
        return True
    return False


@dataclass(frozen=True)
class ComponentValidationProblem:
    """
    A single validation problem.

    Unpacks as the ``(problem, recommendation)`` pair.

    Attributes:
        data: The record that has the problem
        problem: Description of the problem
        recommendation: How to fix the problem
    """

    data: Any
    problem: str
    recommendation: str

    def __iter__(self) -> Iterator[str]:
        yield self.problem
        yield self.recommendation

    def __getitem__(self, index: int) -> str:
        return (self.problem, self.recommendation)[index]

    def __len__(self) -> int:
        return 2

    def __str__(self) -> str:
        return f"{self.problem}  {self.recommendation}"


@dataclass
class ComponentValidation:
    """Ordered collection of validation problems."""

    problems: list[ComponentValidationProblem] = field(default_factory=list)

    def add(self, data: Any, problem: str, recommendation: str) -> None:
        """Append a problem for *data*."""
        self.problems.append(ComponentValidationProblem(data, problem, recommendation))

    def extend(self, other: ComponentValidation | Iterable[ComponentValidationProblem]) -> None:
        """Append every problem from *other*."""
        self.problems.extend(other)

    def __len__(self) -> int:
        return len(self.problems)

    def __iter__(self) -> Iterator[ComponentValidationProblem]:
        return iter(self.problems)

    def __getitem__(self, index: int) -> ComponentValidationProblem:
        return self.problems[index]

    def __bool__(self) -> bool:
        return bool(self.problems)

    def to_strings(self) -> list[str]:
        return [str(p) for p in self.problems]

    def raise_if_problems(self, message: str = "Validation failed") -> None:
        """Raise :class:`ValidationError` if any problem was found."""
        if self.problems:
            raise ValidationError(f"{message} ({len(self.problems)} problems)", self.to_strings())
