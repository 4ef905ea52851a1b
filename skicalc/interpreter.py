"""Combinator interpreter.

For reference:
- "Pure combinators": S, K, I (plus B and C), see skicalc/pure/combinators.py
- "Foreign terms": host functions embedded as combinators, see skicalc/foreign.py

There is no evaluation loop. A driver builds a term and applies it to successive arguments; each application either
returns a partially applied term or reduces. Reduction is strict and recursive, so deep or unbounded recursion
(through `recurse`, say) surfaces as RecursionError: `recursion_limit` raises the interpreter's limit for a block, it
never cuts a reduction short.
"""

import sys
from contextlib import contextmanager


def run(term, *arguments):
    """Applies term to arguments one at a time, left to right, and returns the result."""
    for argument in arguments:
        term = term.apply(argument)
    return term


@contextmanager
def recursion_limit(limit):
    """Temporarily sets the interpreter's recursion limit. A limit of None leaves it untouched."""
    previous = sys.getrecursionlimit()
    if limit is not None:
        sys.setrecursionlimit(limit)
    try:
        yield previous if limit is None else limit
    finally:
        sys.setrecursionlimit(previous)
