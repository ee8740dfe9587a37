import random
import unittest

from lambdastep.pure.lexical import parse, tokenize
from lambdastep.pure.printer import print_term
from lambdastep.term import Abstraction, Application, Variable, alpha_equals


class PrintTermTestCase(unittest.TestCase):

    def test_print_term(self):
        x, y, z = Variable("x"), Variable("y"), Variable("z")
        cases = {
            "x": x,
            "λx.x": Abstraction("x", x),
            "x y": Application(x, y),
            "x y z": Application(Application(x, y), z),
            "x (y z)": Application(x, Application(y, z)),
            "(λx.x) y": Application(Abstraction("x", x), y),
            "x (λy.y)": Application(x, Abstraction("y", y)),
            "(λx.x) (λy.y)": Application(Abstraction("x", x), Abstraction("y", y)),
            "λx.λy.x y": Abstraction("x", Abstraction("y", Application(x, y))),
            "(λx.x) y z": Application(Application(Abstraction("x", x), y), z),
            "x (λy.y) z": Application(Application(x, Abstraction("y", y)), z),
        }
        for expected, case in cases.items():
            self.assertEqual(expected, print_term(case), expected)

    def test_canonical_form(self):
        cases = {
            "\\x. x": "λx.x",
            "((x))": "x",
            "(x y) z": "x y z",
            "(\\x. \\y. x)   a": "(λx.λy.x) a",
            "λx.(x y)": "λx.x y",
            "(λx.x)(λy.y)": "(λx.x) (λy.y)",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, print_term(parse(tokenize(case))), case)

    def test_round_trip(self):
        rng = random.Random(3)

        def random_term(depth):
            kind = rng.randrange(3) if depth > 0 else 0
            if kind == 0:
                return Variable(rng.choice(["a", "b", "f_1", "x2"]))
            elif kind == 1:
                return Application(random_term(depth - 1), random_term(depth - 1))
            return Abstraction(rng.choice(["a", "b"]), random_term(depth - 1))

        for __ in range(300):
            t = random_term(5)
            printed = print_term(t)
            reparsed = parse(tokenize(printed))
            self.assertEqual(t, reparsed, printed)
            self.assertTrue(alpha_equals(t, reparsed), printed)


if __name__ == '__main__':
    unittest.main()
