"""Named programs runnable from the command line. Each builder takes the numeric argument given on the command line and
returns a (term, arguments) pair: the program is run by applying term to arguments, one at a time.
"""

from skicalc.data import F64, I32, Str
from skicalc.foreign import Foreign, greater, if_then, mul, print_, recurse, sub
from skicalc.lang.error import GenericException
from skicalc.lang.numerical import cnumber, succ
from skicalc.pure.abstraction import app, lam
from skicalc.pure.combinators import K, S

ONE = F64(1)
ZERO = F64(0)


def identity(argument):
    """S K K x = x"""
    return S.apply(K).apply(K), [F64(argument)]


def hello(argument):
    """Prints a greeting by threading print through its arguments."""
    return print_, [Str("Hello, "), Str("world!"), Str("\n")]


def countdown_body(self):
    """Host-level recursive body: prints n, n - 1, ..., 1 and returns 0."""

    def step(n):
        def again(_):
            print_.apply(n).apply(Str("\n"))
            return self.apply(sub.apply(n).apply(ONE))

        return if_then.apply(greater.apply(n).apply(ZERO)).apply(Foreign("again", again)).apply(n)

    return Foreign("countdown", step)


def countdown(argument):
    """Prints argument down to 1, one number per line, and reduces to 0."""
    return recurse, [Foreign("countdown_body", countdown_body), F64(argument)]


# λself.λn. if (n > 1) (λ_. n * self (n - 1)) (λ_. 1)
FACTORIAL = lam("self", "n", app(
    if_then,
    app(greater, "n", ONE),
    lam("_", app(mul, "n", app("self", app(sub, "n", ONE)))),
    lam("_", ONE),
))


def factorial(argument):
    """argument! through recurse, compiled from a lambda term."""
    return recurse, [FACTORIAL.to_combinator(), F64(argument)]


def church(argument):
    """Counts the applications in the Church numeral for argument."""
    if isinstance(argument, float) and not argument.is_integer():
        raise GenericException("expected natural number, got '{}'", str(argument))
    return cnumber(int(argument)), [succ, I32(0)]


PROGRAMS = {
    "identity": identity,
    "hello": hello,
    "countdown": countdown,
    "factorial": factorial,
    "church": church,
}


def build(name, argument=0.0):
    """Returns the (term, arguments) pair for program name."""
    if name not in PROGRAMS:
        raise GenericException("unknown program '{}' (try --list)", name)
    return PROGRAMS[name](argument)


def describe(name):
    """First line of a program's docstring."""
    return PROGRAMS[name].__doc__.strip().splitlines()[0]
