"""Storage-independent filter expressions over the member/team schema.

A missing filter is always ``None``. Combinators treat ``None`` as the identity
for AND, so callers never need a vacuous "match everything" object and query
adapters can simply omit the WHERE clause.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Attribute(str, Enum):
    member_id = "member_id"
    username = "username"
    age = "age"
    team_id = "team_id"
    team_name = "team_name"

    @property
    def is_team_attribute(self) -> bool:
        return self in (Attribute.team_id, Attribute.team_name)


class Operator(str, Enum):
    eq = "eq"
    goe = "goe"
    loe = "loe"


class Predicate(ABC):
    @abstractmethod
    def attributes(self) -> frozenset[Attribute]:
        """Attributes referenced anywhere in the expression."""

    @abstractmethod
    def leaves(self) -> tuple["Comparison", ...]:
        """Leaf comparisons in combination order."""

    def __and__(self, other: "Predicate | None") -> "Predicate":
        return and_all(self, other)  # type: ignore[return-value]

    def __rand__(self, other: "Predicate | None") -> "Predicate":
        return and_all(other, self)  # type: ignore[return-value]


@dataclass(frozen=True)
class Comparison(Predicate):
    attribute: Attribute
    operator: Operator
    value: Any

    def attributes(self) -> frozenset[Attribute]:
        return frozenset({self.attribute})

    def leaves(self) -> tuple["Comparison", ...]:
        return (self,)


@dataclass(frozen=True)
class Conjunction(Predicate):
    operands: tuple[Comparison, ...]

    def attributes(self) -> frozenset[Attribute]:
        return frozenset(operand.attribute for operand in self.operands)

    def leaves(self) -> tuple[Comparison, ...]:
        return self.operands


def and_all(*predicates: Predicate | None) -> Predicate | None:
    leaves: list[Comparison] = []
    for predicate in predicates:
        if predicate is None:
            continue
        leaves.extend(predicate.leaves())
    if not leaves:
        return None
    if len(leaves) == 1:
        return leaves[0]
    return Conjunction(operands=tuple(leaves))


def eq(attribute: Attribute, value: Any) -> Comparison:
    return Comparison(attribute=attribute, operator=Operator.eq, value=value)


def goe(attribute: Attribute, value: Any) -> Comparison:
    return Comparison(attribute=attribute, operator=Operator.goe, value=value)


def loe(attribute: Attribute, value: Any) -> Comparison:
    return Comparison(attribute=attribute, operator=Operator.loe, value=value)
