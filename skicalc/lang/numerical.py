"""Natural numbers encoded as Church numerals and booleans encoded as Church booleans. Numerals are written as lambda
terms and compiled to combinators, thus keeping everything as pure as possible; conversion back to host values is done
by applying the term to foreign primitives.

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from skicalc.data import I32
from skicalc.foreign import Foreign
from skicalc.lang.error import GenericException, PayloadError
from skicalc.pure.abstraction import app, lam
from skicalc.term import PayloadKind


def cnumber(num):
    """Returns the combinator for Church numeral num (cnum = Church numeral)."""
    try:
        assert not isinstance(num, (float, bool))
        num = int(num)
        assert num >= 0
    except (AssertionError, TypeError, ValueError):
        raise GenericException("expected natural number, got '{}'", repr(num), internal=True)

    body = "x"
    for _ in range(num):
        body = app("f", body)

    return lam("f", "x", body).to_combinator()


def _succ(n):
    return I32(n.unwrap(PayloadKind.INT, "succ", 0) + 1)


succ = Foreign("succ", _succ)


def number(cnum):
    """Returns int given Church numeral cnum. If cnum isn't a Church numeral, returns None.

    cnum is found out by applying it to `succ` and `I32(0)`, so a term that isn't a numeral is still run on them:
    `number(print_)` prints both before returning None, and a diverging term never returns.
    """
    try:
        result = cnum.apply(succ).apply(I32(0))
    except PayloadError:
        return None

    payload = result.data()
    if payload is None or payload.kind is not PayloadKind.INT:
        return None
    return payload.value


def truth(cbool):
    """Returns the host bool for Church boolean cbool (K is true, K I is false)."""
    result = cbool.apply(I32(1)).apply(I32(0)).unwrap(PayloadKind.INT, "truth", 0)
    if result not in (0, 1):
        raise GenericException("'{}' is not a Church boolean", str(cbool))
    return result == 1
