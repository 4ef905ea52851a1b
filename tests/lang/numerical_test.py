import io
import unittest
from contextlib import redirect_stdout

from skicalc.data import F64, I32, Str
from skicalc.foreign import print_
from skicalc.lang.error import GenericException, PayloadError
from skicalc.lang.numerical import cnumber, number, succ, truth
from skicalc.pure.abstraction import app, lam
from skicalc.pure.combinators import FALSE, I, K, TRUE


class NumericalTestCase(unittest.TestCase):

    def test_cnumber(self):
        should_fail = [-2, 0.3, 4.0, 14.2, True, "x"]
        for case in should_fail:
            self.assertRaises(GenericException, cnumber, case)

        should_pass = {0: lam("f", "x", "x"), 3: lam("f", "x", app("f", app("f", app("f", "x"))))}
        for case, result in should_pass.items():
            self.assertEqual(result.to_combinator(), cnumber(case), case)

    def test_zero_and_one(self):
        self.assertEqual(K.apply(I), cnumber(0))
        self.assertEqual(I, cnumber(1))

    def test_number(self):
        should_fail = [K, Str("3"), F64(3), TRUE]
        for case in should_fail:
            self.assertIsNone(number(case), case)

        for case in [0, 1, 2, 7, 25]:
            self.assertEqual(case, number(cnumber(case)), case)

    def test_number_runs_its_argument(self):
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertIsNone(number(print_))
        self.assertEqual("succ0", out.getvalue())

    def test_numeral_applies_function(self):
        # 3 f x = f (f (f x))
        self.assertEqual(I32(13), cnumber(3).apply(succ).apply(I32(10)))

    def test_succ(self):
        self.assertEqual(I32(1), succ.apply(I32(0)))
        self.assertRaises(PayloadError, succ.apply, F64(0))

    def test_truth(self):
        self.assertTrue(truth(TRUE))
        self.assertFalse(truth(FALSE))
        self.assertRaises(PayloadError, truth, F64(1))
        self.assertRaises(GenericException, truth, K.apply(I32(5)))


if __name__ == '__main__':
    unittest.main()
