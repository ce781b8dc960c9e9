"""Analysed module record schemas.

An AnalysedModule is the result of analysing one source file. It carries the
raw metrics produced by an analyser plus the two values the scoring core
consumes: ``cost`` and ``rating``.

Cost is derived from the metrics unless supplied explicitly:

    cost = sum(smell.cost for smell in smells) + complexity / COMPLEXITY_FACTOR

Explicit values are forwarded as-is. A negative cost is not rejected here;
well-formedness is the analyser's responsibility.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from critic_core.constants import COMPLEXITY_FACTOR, SMELL_COST
from critic_core.schemas.rating import Rating


class Smell(BaseModel):
    """A single code smell found in a module.

    Example:
        >>> smell = Smell(
        ...     type="ComplexMethod",
        ...     context="parse_header",
        ...     message="has a cyclomatic complexity of 14",
        ...     line=42,
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(..., min_length=1, description="Smell type (ComplexMethod, ...)")

    context: str = Field(..., description="Function or scope the smell was found in")

    message: str = Field(default="", description="Human-readable description")

    line: Annotated[int | None, Field(ge=1)] = None
    """Line number of the smell, if known."""

    cost: Annotated[float, Field(ge=0)] = SMELL_COST
    """Contribution of this smell to the module cost."""


def _smell_cost(smell: Any) -> float:
    if isinstance(smell, Smell):
        return smell.cost
    if isinstance(smell, dict):
        if smell.get("cost") is None:
            return SMELL_COST
        try:
            return float(smell["cost"])
        except (TypeError, ValueError) as e:
            msg = f"invalid smell cost: {smell['cost']!r}"
            raise ValueError(msg) from e
    return SMELL_COST


class AnalysedModule(BaseModel):
    """Analysed representation of one source module.

    Example:
        >>> module = AnalysedModule(
        ...     name="pkg.parser",
        ...     path="src/pkg/parser.py",
        ...     complexity=50.0,
        ...     methods_count=4,
        ... )
        >>> module.cost
        2.0
        >>> str(module.rating)
        'A'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Dotted module name")

    path: str = Field(..., min_length=1, description="Path identifier from discovery")

    smells: tuple[Smell, ...] = Field(default=(), description="Smells found")

    churn: Annotated[int, Field(ge=0)] = 0
    """Number of recorded changes. Forwarded only; not computed here."""

    complexity: Annotated[float, Field(ge=0)] = 0.0
    """Summed cyclomatic complexity of the module."""

    duplication: Annotated[float, Field(ge=0)] = 0.0
    """Duplication mass reported by the analyser."""

    methods_count: Annotated[int, Field(ge=0)] = 0
    """Number of functions and methods defined in the module."""

    cost: float = Field(..., description="Maintenance burden used for scoring")

    rating: Rating = Field(..., description="Grade derived from cost")

    @model_validator(mode="before")
    @classmethod
    def derive_cost_and_rating(cls, data: Any) -> Any:
        """Fill in ``cost`` and ``rating`` when they are not given."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("cost") is None:
            smell_cost = sum(_smell_cost(smell) for smell in data.get("smells") or [])
            data["cost"] = smell_cost + float(data.get("complexity") or 0.0) / COMPLEXITY_FACTOR
        if data.get("rating") is None:
            data["rating"] = Rating.from_cost(float(data["cost"]))
        return data

    @property
    def smells_count(self) -> int:
        """Number of smells found in the module."""
        return len(self.smells)


__all__ = [
    "AnalysedModule",
    "Smell",
]
