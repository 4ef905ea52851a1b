"""Renders terms as the Python expression that rebuilds them, e.g. `S.apply(K).apply(F64(2.0))`.

Combinators and values render with the constructors and constants exported by skicalc; foreign terms render by name,
so the output only evaluates back to the same term where every foreign name is a known primitive.
"""

from skicalc.data import F64, I32, List, NilType, Str, Table
from skicalc.foreign import Foreign
from skicalc.lang.error import GenericException
from skicalc.pure.combinators import Combinator


def source(term):
    """Returns Python source for term."""
    if isinstance(term, Combinator):
        return term.symbol + "".join(f".apply({source(arg)})" for arg in term.args)

    if isinstance(term, Table):
        items = ", ".join(f"{key!r}: {source(term.value[key])}" for key in sorted(term.value))
        return f"Table({{{items}}})"

    if isinstance(term, List):
        return f"List([{', '.join(source(item) for item in term.value)}])"

    if isinstance(term, (Str, I32, F64)):
        return f"{type(term).__name__}({term.value!r})"

    if isinstance(term, NilType):
        return "Nil"

    if isinstance(term, Foreign):
        return term.name

    raise GenericException("cannot render '{}' as source", repr(term), internal=True)
