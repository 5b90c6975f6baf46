"""
testing formula normalization and tokenizing
"""
from __future__ import annotations

import unittest

import glslmath.parsing.base as base

from glslmath.parsing import tokenize
from glslmath.parsing.lexer import FormulaLexer
from glslmath.errors import FormulaLexicalError



def pairs(formula):
    return [(t.type, t.value) for t in tokenize(formula)]



class TestNormalize(unittest.TestCase):

    def test_strips_whitespace(self):
        self.assertEqual(FormulaLexer.normalize('  2x + x^2 \n'), '2x+x^2')

    def test_pi_any_case(self):
        for pi in ('pi', 'Pi', 'PI', 'pI'):
            self.assertEqual(FormulaLexer.normalize(pi), '(3.14159265359)')

    def test_e_constant(self):
        self.assertEqual(FormulaLexer.normalize('Ex'), '(2.71828182846)x')
        self.assertEqual(FormulaLexer.normalize('32e'), '32(2.71828182846)')

    def test_e_inside_ceil_is_kept(self):
        self.assertEqual(FormulaLexer.normalize('ceil(x)'), 'ceil(x)')

    def test_touching_minus_is_negation(self):
        self.assertEqual(FormulaLexer.normalize('-2x'), 'neg2x')
        self.assertEqual(FormulaLexer.normalize('x^-2'), 'x^neg2')
        self.assertEqual(FormulaLexer.normalize('x-2'), 'xneg2')

    def test_spaced_minus_is_subtraction(self):
        self.assertEqual(FormulaLexer.normalize('x - 2'), 'x-2')



class TestTokenize(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(tokenize(''), [])
        self.assertEqual(tokenize('   '), [])

    def test_implicit_multiplication(self):
        self.assertEqual(
            pairs('2x'),
            [(base.NUMBER, '2.0'), (base.X, 'x')]
        )

    def test_operators(self):
        self.assertEqual(
            pairs('x + x * x / x - x'),
            [
                (base.X, 'x'), (base.PLUS, '+'), (base.X, 'x'), (base.MUL, '*'),
                (base.X, 'x'), (base.DIV, '/'), (base.X, 'x'), (base.MINUS, '-'),
                (base.X, 'x')
            ]
        )

    def test_numbers_keep_their_digits(self):
        self.assertEqual(pairs('3.50'), [(base.NUMBER, '3.50')])
        self.assertEqual(pairs('007'), [(base.NUMBER, '007.0')])
        self.assertEqual(pairs('0.000001'), [(base.NUMBER, '0.000001')])

    def test_negative_and_power(self):
        self.assertEqual(
            pairs('x^-2'),
            [
                (base.X, 'x'), (base.POWER, '^'), (base.NEGATIVE, 'neg'),
                (base.NUMBER, '2.0')
            ]
        )

    def test_every_function(self):
        names = [
            'sin', 'cos', 'tan', 'asin', 'acos', 'atan',
            'log', 'abs', 'ceil', 'floor', 'round', 'sqrt'
        ]
        tokens = tokenize(''.join(f'{name}(x)' for name in names))
        found = [t.value for t in tokens if t.type == base.FUNCTION]
        self.assertEqual(found, names)

    def test_positions(self):
        tokens = tokenize('x + 25')
        self.assertEqual([t.pos for t in tokens], [0, 1, 2])

    def test_tokens_are_read_only(self):
        token = tokenize('x')[0]
        with self.assertRaises(AttributeError):
            token.type = base.NUMBER



class TestLexicalErrors(unittest.TestCase):

    def test_unknown_character(self):
        with self.assertRaises(FormulaLexicalError) as cm:
            tokenize('x % 2')
        self.assertEqual(cm.exception.symbol, '%')
        self.assertEqual(cm.exception.remaining, '%2')
        self.assertEqual(cm.exception.pos, 1)

    def test_second_variable(self):
        with self.assertRaises(FormulaLexicalError):
            tokenize('x + y')

    def test_misspelled_keyword_suggests(self):
        with self.assertRaises(FormulaLexicalError) as cm:
            tokenize('lag(x)')
        self.assertIn("did you mean 'log'", str(cm.exception))

        with self.assertRaises(FormulaLexicalError) as cm:
            tokenize('flor(x)')
        self.assertIn("did you mean 'floor'", str(cm.exception))

    def test_bad_negative_marker(self):
        with self.assertRaises(FormulaLexicalError):
            tokenize('n')

    def test_trailing_decimal_point(self):
        with self.assertRaises(FormulaLexicalError) as cm:
            tokenize('2.')
        self.assertEqual(cm.exception.symbol, '.')

    def test_unsupported_function(self):
        with self.assertRaises(FormulaLexicalError) as cm:
            tokenize('sinh(x)')
        self.assertEqual(cm.exception.symbol, 'h')

        # 'e' becomes the constant, leaving 'xp' behind
        with self.assertRaises(FormulaLexicalError) as cm:
            tokenize('exp(x)')
        self.assertEqual(cm.exception.symbol, 'p')
        self.assertEqual(cm.exception.pos, 16)



if __name__ == '__main__':
    unittest.main()
