"""Value terms: terminal terms that carry host payloads.

Applying a value to anything returns the value itself, so a chain like `value.apply(x).apply(y)` degrades gracefully
instead of failing. Values are inspected through `data`, never by applying them.
"""

import math
from types import MappingProxyType

from skicalc.term import Payload, PayloadKind, Term


class Value(Term):
    """Superclass of the value terms. Subclasses set `kind` and store their payload in `self.value`."""
    kind = None

    def __init__(self, value):
        self.value = value

    def apply(self, argument):
        return self

    def data(self):
        return Payload(self.kind, self.value)

    def __eq__(self, other):
        return isinstance(other, type(self)) and self.value == other.value

    def __hash__(self):
        return hash((type(self), self.value))

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return repr(self.value)


class Table(Value):
    """Immutable mapping of string keys to terms. Rendered with sorted keys: `{ "a":1 "b":2 }`."""
    kind = PayloadKind.TABLE

    def __init__(self, table=None):
        table = dict(table or {})
        for key, term in table.items():
            assert isinstance(key, str), f"table keys must be strings, got {key!r}"
            assert isinstance(term, Term), f"table values must be terms, got {term!r}"
        super().__init__(MappingProxyType(table))

    def __eq__(self, other):
        return isinstance(other, Table) and dict(self.value) == dict(other.value)

    def __hash__(self):
        return hash((Table, frozenset(self.value.items())))

    def __str__(self):
        return "{ " + "".join(f"\"{key}\":{self.value[key]} " for key in sorted(self.value)) + "}"

    def __repr__(self):
        return "{ " + "".join(f"\"{key}\":{self.value[key]!r} " for key in sorted(self.value)) + "}"


class List(Value):
    """Immutable sequence of terms: `[ 1 2 3 ]`."""
    kind = PayloadKind.LIST

    def __init__(self, items=()):
        items = tuple(items)
        for term in items:
            assert isinstance(term, Term), f"list items must be terms, got {term!r}"
        super().__init__(items)

    def __str__(self):
        return "[ " + "".join(f"{item} " for item in self.value) + "]"

    def __repr__(self):
        return "[ " + "".join(f"{item!r} " for item in self.value) + "]"


class Str(Value):
    kind = PayloadKind.STRING

    def __init__(self, value):
        super().__init__(str(value))


class I32(Value):
    """32-bit signed integer. Values outside the range are rejected rather than wrapped."""
    kind = PayloadKind.INT
    MIN = -2 ** 31
    MAX = 2 ** 31 - 1

    def __init__(self, value):
        assert isinstance(value, int) and not isinstance(value, bool), f"expected int, got {value!r}"
        assert I32.MIN <= value <= I32.MAX, f"{value} does not fit in 32 bits"
        super().__init__(value)


class F64(Value):
    kind = PayloadKind.FLOAT

    def __init__(self, value):
        super().__init__(float(value))

    def __str__(self):
        # whole numbers render without a trailing ".0": F64(2.0) -> 2
        if math.isfinite(self.value) and self.value.is_integer() and abs(self.value) < 1e21:
            return str(int(self.value))
        return str(self.value)


class NilType(Term):
    """Terminal term with no payload. Absorbs every application."""

    def apply(self, argument):
        return self

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def __str__(self):
        return "Nil"


Nil = NilType()
