"""Foreign terms: combinators whose behaviour is a host (Python) function rather than a composition of S, K and I.

Every native capability is a Foreign, usually several nested ones: a curried primitive returns a fresh Foreign closing
over the arguments it has seen so far. Foreign bodies are the only place where terms are inspected through `data`, and
each body validates the payloads it unwraps (see `Term.unwrap`), raising PayloadError on a mismatch.
"""

from skicalc.data import F64
from skicalc.pure.combinators import I, boolean
from skicalc.term import PayloadKind, Term


class Foreign(Term):
    """Named host function `Term -> Term`. Applying the term calls the function. Partial applications of a primitive
    keep the primitive's name, the arguments they close over are not rendered.
    """

    def __init__(self, name, function):
        self.name = name
        self.function = function

    def apply(self, argument):
        return self.function(argument)

    def __eq__(self, other):
        return isinstance(other, Foreign) and self.name == other.name and self.function == other.function

    def __hash__(self):
        return hash((self.name, self.function))

    def __str__(self):
        return self.name


def binary(name, operation):
    """Curried two-argument primitive over float payloads: `name x y = operation(x, y)`."""

    def first(x):
        a = x.unwrap(PayloadKind.FLOAT, name, 0)

        def second(y):
            return operation(a, y.unwrap(PayloadKind.FLOAT, name, 1))

        return Foreign(name, second)

    return Foreign(name, first)


def _print(argument):
    print(argument, end="")
    return print_


def _recurse(f):
    # fix f = f (λv. fix f v): the self reference is only rebuilt once it is applied to v
    return f.apply(Foreign("recurse", lambda v: _recurse(f).apply(v)))


def _if_then(cond):
    def then(x):
        def otherwise(y):
            return cond.apply(x).apply(y).apply(I)

        return Foreign("if", otherwise)

    return Foreign("if", then)


print_ = Foreign("print", _print)
recurse = Foreign("recurse", _recurse)
sub = binary("sub", lambda a, b: F64(a - b))
mul = binary("mul", lambda a, b: F64(a * b))
greater = binary("greater", lambda a, b: boolean(a > b))
if_then = Foreign("if", _if_then)
