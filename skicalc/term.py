"""Base term type shared by every combinator, value and foreign primitive.

A term is anything that can be applied to another term. Application is evaluation: there is no separate reduction loop,
each call to `apply` either returns a partially applied term or performs a rewrite and returns its result.

Host values cross the boundary through `data`, which returns a `Payload` (a kind tag plus the raw Python value) or None
for terms that carry nothing but behaviour (S, K, I, foreign primitives).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from skicalc.lang.error import PayloadError


class PayloadKind(Enum):
    """Closed set of host payloads a term can expose."""
    FLOAT = "float"
    INT = "int"
    STRING = "string"
    TABLE = "table"
    LIST = "list"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Payload:
    kind: PayloadKind
    value: Any


class Term(ABC):
    """Superclass of every term. Subclasses are immutable: applying a term never changes it."""

    @abstractmethod
    def apply(self, argument: "Term") -> "Term":
        """Applies this term to argument and returns the result. Must always return a Term."""

    def data(self) -> Optional[Payload]:
        """Host payload carried by this term, None by default."""
        return None

    def unwrap(self, kind, primitive="<host>", position=0):
        """Returns the host value of this term's payload, raising PayloadError if the payload is missing or is not of
        the requested kind. primitive and position identify the consumer in the error message.
        """
        payload = self.data()
        if payload is None:
            raise PayloadError(primitive, position, kind, None, self)
        if payload.kind is not kind:
            raise PayloadError(primitive, position, kind, payload.kind, self)
        return payload.value

    def __call__(self, *arguments):
        """Applies arguments one at a time, left to right: term(x, y) == term.apply(x).apply(y)."""
        result = self
        for argument in arguments:
            result = result.apply(argument)
        return result

    @abstractmethod
    def __eq__(self, other):
        """Structural equality. Subclasses define a matching `__hash__`, so terms whose payloads are hashable can be
        used in sets and as dict keys.
        """

    def __repr__(self):
        return str(self)
