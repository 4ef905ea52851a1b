import unittest

from skicalc.data import F64, I32, List, Nil, Str, Table
from skicalc.foreign import print_, sub
from skicalc.lang.error import GenericException
from skicalc.pure.combinators import B, C, I, K, S
from skicalc.render import source
from skicalc.term import Term


class SourceTestCase(unittest.TestCase):

    def test_source(self):
        cases = [
            (S, "S"),
            (S.apply(K).apply(K), "S.apply(K).apply(K)"),
            (K.apply(I), "K.apply(I)"),
            (B.apply(C), "B.apply(C)"),
            (F64(2), "F64(2.0)"),
            (I32(3), "I32(3)"),
            (Str("it's"), "Str(\"it's\")"),
            (List([I, F64(1)]), "List([I, F64(1.0)])"),
            (Table({"b": I, "a": Str("x")}), "Table({'a': Str('x'), 'b': I})"),
            (Nil, "Nil"),
            (sub, "sub"),
            (print_, "print"),
            (S.apply(sub), "S.apply(sub)"),
        ]
        for case, expected in cases:
            self.assertEqual(expected, source(case), case)

    def test_unknown_term(self):
        class Opaque(Term):
            def apply(self, argument):
                return self

            def __eq__(self, other):
                return self is other

            def __str__(self):
                return "opaque"

        self.assertRaises(GenericException, source, Opaque())


if __name__ == '__main__':
    unittest.main()
