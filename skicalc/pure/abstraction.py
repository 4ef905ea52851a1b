"""Lambda terms and their translation to combinators (bracket abstraction).

Lambda terms are built programmatically, there is no surface syntax:

```
<λ-term> ::= Variable(name)                 ; bound variable
           | Abstraction(name, <λ-term>)    ; λname.<λ-term>
           | Application(<λ-term>, <λ-term>) ; left applied to right
           | Constant(<term>)               ; any skicalc term, e.g. a foreign primitive
```

`to_combinator` first eliminates every abstraction, innermost first, and then folds the remaining applications with
`Term.apply`. Abstracting a variable x out of a lambda-free term follows Turner's rules:

```
λx.x       = I
λx.c       = K c            ; c is a variable other than x, or a constant
λx.(a x)   = a              ; a is an atom (variable or constant) other than x
λx.(a B)   = B a (λx.B)     ; a is an atom other than x
λx.(A b)   = C (λx.A) b     ; b is an atom other than x
λx.(A B)   = S (λx.A) (λx.B)
```

Reduction is strict, so any application left outside an abstraction is reduced as soon as the surrounding abstractions
are applied, whether or not x is ever supplied. The shortcuts above therefore only ever leave atoms outside, and the
rule `λx.(A B) = K (A B)` is missing altogether. Every application in the body of `λx.M` is reduced only once x is,
which is what makes `λ_.M` usable as a thunk (see if_then).
"""

from abc import ABC, abstractmethod

from skicalc.lang.error import GenericException
from skicalc.pure.combinators import B, C, I, K, S
from skicalc.term import Term


class LambdaTerm(ABC):
    """Superclass of the lambda term nodes."""

    atomic = False

    def __init__(self, *nodes):
        self.nodes = list(nodes)
        self._cls = type(self).__name__

    @property
    @abstractmethod
    def free(self):
        """Set of names of the free variables in this term."""

    @abstractmethod
    def eliminate(self):
        """Returns an equivalent term with no Abstraction nodes."""

    @abstractmethod
    def abstract(self, name):
        """Returns a lambda-free term equivalent to λname.self. Assumes self is already lambda-free."""

    @abstractmethod
    def build(self):
        """Folds a lambda-free term into a skicalc Term by applying its nodes."""

    def to_combinator(self):
        """Compiles this lambda term to a combinator Term. Raises GenericException on a free variable."""
        return self.eliminate().build()

    def __eq__(self, other):
        return isinstance(other, type(self)) and self.nodes == other.nodes

    def __repr__(self):
        return f"{self._cls}({', '.join(repr(node) for node in self.nodes)})"


class Variable(LambdaTerm):
    atomic = True

    def __init__(self, name):
        assert isinstance(name, str) and name, "variable names must be non-empty strings"
        super().__init__(name)
        self.name = name

    @property
    def free(self):
        return {self.name}

    def eliminate(self):
        return self

    def abstract(self, name):
        if self.name == name:
            return Constant(I)
        return Application(Constant(K), self)

    def build(self):
        raise GenericException("free variable '{}' is never bound", self.name)

    def __str__(self):
        return self.name


class Constant(LambdaTerm):
    """Embeds an existing skicalc Term in a lambda term."""
    atomic = True

    def __init__(self, term):
        assert isinstance(term, Term), f"expected a Term, got {term!r}"
        super().__init__(term)
        self.term = term

    @property
    def free(self):
        return set()

    def eliminate(self):
        return self

    def abstract(self, name):
        return Application(Constant(K), self)

    def build(self):
        return self.term

    def __str__(self):
        return repr(self.term)


class Application(LambdaTerm):

    def __init__(self, left, right):
        super().__init__(wrap(left), wrap(right))

    @property
    def free(self):
        left, right = self.nodes
        return left.free | right.free

    def eliminate(self):
        left, right = self.nodes
        return Application(left.eliminate(), right.eliminate())

    def abstract(self, name):
        left, right = self.nodes

        # only atoms may stay outside the abstraction, an application left there is reduced before x is supplied
        if name not in left.free and left.atomic:
            if right == Variable(name):
                return left
            return Application(Application(Constant(B), left), right.abstract(name))

        if name not in right.free and right.atomic:
            return Application(Application(Constant(C), left.abstract(name)), right)

        return Application(Application(Constant(S), left.abstract(name)), right.abstract(name))

    def build(self):
        left, right = self.nodes
        return left.build().apply(right.build())

    def __str__(self):
        left, right = self.nodes
        return f"({left})({right})"


class Abstraction(LambdaTerm):

    def __init__(self, name, body):
        assert isinstance(name, str) and name, "bound names must be non-empty strings"
        super().__init__(Variable(name), wrap(body))
        self.name = name

    @property
    def free(self):
        __, body = self.nodes
        return body.free - {self.name}

    def eliminate(self):
        __, body = self.nodes
        return body.eliminate().abstract(self.name)

    def abstract(self, name):
        return self.eliminate().abstract(name)

    def build(self):
        return self.eliminate().build()

    def __str__(self):
        arg, body = self.nodes
        return f"λ{arg}.{body}"


def wrap(node):
    """Coerces node to a LambdaTerm: strings become variables, skicalc terms become constants."""
    if isinstance(node, LambdaTerm):
        return node
    if isinstance(node, str):
        return Variable(node)
    if isinstance(node, Term):
        return Constant(node)
    raise GenericException("cannot use '{}' as a λ-term", repr(node), internal=True)


def var(name):
    return Variable(name)


def lam(*names_and_body):
    """Curried abstraction: lam("x", "y", body) is λx.λy.body."""
    *names, body = names_and_body
    assert names, "lam needs at least one bound name"
    result = wrap(body)
    for name in reversed(names):
        result = Abstraction(name, result)
    return result


def app(function, *arguments):
    """Left-associated application: app(f, x, y) is ((f x) y)."""
    result = wrap(function)
    for argument in arguments:
        result = Application(result, argument)
    return result
