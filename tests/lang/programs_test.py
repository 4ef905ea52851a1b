import io
import unittest
from contextlib import redirect_stdout

from skicalc.data import F64, I32
from skicalc.foreign import print_
from skicalc.interpreter import run
from skicalc.lang.error import GenericException
from skicalc.lang.programs import FACTORIAL, PROGRAMS, build, describe


class ProgramsTestCase(unittest.TestCase):

    def run_program(self, name, argument=0.0):
        term, arguments = build(name, argument)
        out = io.StringIO()
        with redirect_stdout(out):
            result = run(term, *arguments)
        return result, out.getvalue()

    def test_identity(self):
        self.assertEqual((F64(3), ""), self.run_program("identity", 3.0))

    def test_hello(self):
        self.assertEqual((print_, "Hello, world!\n"), self.run_program("hello"))

    def test_countdown(self):
        self.assertEqual((F64(0), "3\n2\n1\n"), self.run_program("countdown", 3.0))
        self.assertEqual((F64(0), ""), self.run_program("countdown", 0.0))

    def test_factorial(self):
        cases = {0.0: 1, 1.0: 1, 4.0: 24, 5.0: 120, 8.0: 40320}
        for case, expected in cases.items():
            self.assertEqual((F64(expected), ""), self.run_program("factorial", case), case)

    def test_factorial_is_compiled(self):
        self.assertEqual(set(), FACTORIAL.free)
        self.assertIsNone(FACTORIAL.to_combinator().data())

    def test_church(self):
        for case in [0.0, 1.0, 6.0]:
            self.assertEqual((I32(int(case)), ""), self.run_program("church", case), case)
        self.assertRaises(GenericException, build, "church", 1.5)
        self.assertRaises(GenericException, build, "church", -1.0)

    def test_unknown(self):
        self.assertRaises(GenericException, build, "missing")

    def test_describe(self):
        for name in PROGRAMS:
            self.assertTrue(describe(name), name)
        self.assertEqual("S K K x = x", describe("identity"))


if __name__ == '__main__':
    unittest.main()
