"""
Specification Pattern

A table group rule is a predicate over the tables (or orders) involved,
paired with the reason reported when it fails. Rules that must NOT hold,
such as "some table is already grouped", are written as negated
specifications.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """A single grouping or ungrouping rule."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        pass

    def __invert__(self) -> "NotSpecification[T]":
        return NotSpecification(self)


class NotSpecification(Specification[T]):
    """Holds exactly when the wrapped rule does not."""

    def __init__(self, spec: Specification[T]):
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)
