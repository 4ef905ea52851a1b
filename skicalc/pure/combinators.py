"""Pure combinators: the fixed rewrite rules of combinatory logic.

```
I x     = x
K x y   = x
S x y z = (x z) (y z)
B x y z = x (y z)       ; composition
C x y z = x z y         ; flip
```

Every combinator accumulates its arguments one application at a time. A partially applied combinator is a new node
holding the arguments seen so far, never the previous node mutated in place, so a partial application can be shared
and reapplied freely:

```
>>> SK = S.apply(K)
>>> SK.apply(K).apply(I), SK.apply(K).apply(K)
(I, K)
```

Booleans have no dedicated type. They are Church-encoded: K selects its first argument (true), K I its second (false).
"""

from abc import abstractmethod

from skicalc.term import Term


class Combinator(Term):
    """Superclass for combinators that fire after a fixed number of arguments. Subclasses set `arity` and implement
    `rewrite`, which receives all the accumulated arguments plus the final one.
    """
    arity = 0
    symbol = ""

    def __init__(self, *args):
        assert len(args) < self.arity, f"{self.symbol} takes at most {self.arity - 1} captured arguments"
        self.args = tuple(args)

    def apply(self, argument):
        if len(self.args) + 1 == self.arity:
            return self.rewrite(*self.args, argument)
        return type(self)(*self.args, argument)

    @abstractmethod
    def rewrite(self, *args):
        """Result of the saturated application."""

    def __eq__(self, other):
        return isinstance(other, type(self)) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))

    def __str__(self):
        return self.symbol + "".join(f"({arg})" for arg in self.args)

    def __repr__(self):
        return self.symbol + "".join(f"({arg!r})" for arg in self.args)


class Substitution(Combinator):
    """S x y z = (x z) (y z)"""
    arity = 3
    symbol = "S"

    def rewrite(self, x, y, z):
        return x.apply(z).apply(y.apply(z))


class Constant(Combinator):
    """K x y = x"""
    arity = 2
    symbol = "K"

    def rewrite(self, x, y):
        return x


class Identity(Combinator):
    """I x = x"""
    arity = 1
    symbol = "I"

    def rewrite(self, x):
        return x


class Composition(Combinator):
    """B x y z = x (y z)"""
    arity = 3
    symbol = "B"

    def rewrite(self, x, y, z):
        return x.apply(y.apply(z))


class Flip(Combinator):
    """C x y z = x z y"""
    arity = 3
    symbol = "C"

    def rewrite(self, x, y, z):
        return x.apply(z).apply(y)


S = Substitution()
K = Constant()
I = Identity()
B = Composition()
C = Flip()

TRUE = K
FALSE = K.apply(I)


def boolean(value):
    """Church boolean for a host truth value."""
    return TRUE if value else FALSE
