"""
module for the glslmath Lexer - normalizes a formula and reads it into a flat
list of tokens
"""

from __future__ import annotations

import re

import glslmath.parsing.base as base

from glslmath.parsing.base import Token
from glslmath.errors import FormulaLexicalError



PI_PATTERN = re.compile(r'pi', re.IGNORECASE)

# an 'e' after a 'c' or before an 'i' belongs to a function name ('ceil')
E_PATTERN = re.compile(r'(?<!c)[Ee](?!i)')

# a '-' touching the following character is a negation, one surrounded by
#    whitespace is a subtraction
NEGATIVE_PATTERN = re.compile(r'-(?=\S)')

WHITESPACE_PATTERN = re.compile(r'\s')

NUMBER_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]+)?')



class FormulaLexer(object):
    """
    cursor-based lexer over the normalized text of a single formula
    """

    # keywords recognized by leading character, longest prefixes first
    keyword_prefixes = {
        's': (base.SQRT, base.SIN),
        'c': (base.CEIL, base.COS),
        't': (base.TAN,),
        'a': (base.ASIN, base.ACOS, base.ATAN, base.ABS),
        'l': (base.LOG,),
        'f': (base.FLOOR,),
        'r': (base.ROUND,),
    }

    def __init__(
        self,
        text: str
    ):
        self.raw_text = text
        self.text = self.normalize(text)

        self.pos = 0
        self.current_char = self.text[0] if self.text else None

    @staticmethod
    def normalize(text: str) -> str:
        """
        substitute the constants and negation markers, then strip whitespace. The
        order matters: the negation marker is decided by the whitespace that is
        removed afterwards

        Parameters
        ----------
        text : str
            the raw formula

        Returns
        -------
        str
        """
        text = text.strip()
        text = PI_PATTERN.sub(f'({base.PI_LITERAL})', text)
        text = E_PATTERN.sub(f'({base.E_LITERAL})', text)
        text = NEGATIVE_PATTERN.sub(base.NEGATIVE_MARKER, text)
        return WHITESPACE_PATTERN.sub('', text)


    # basic lexer functionality
    def tokenize(self) -> list:
        tokens = list()
        while self.current_char is not None:
            tokens.append(self.next_token())
        return tokens

    def error(self, symbol, expected=None):
        raise FormulaLexicalError(
            symbol,
            self.text[self.pos:],
            self.pos,
            expected=expected
        )

    def advance(self, n=1):
        self.pos += n
        try:
            self.current_char = self.text[self.pos]
        except IndexError:
            self.current_char = None

    def peek_text(self, n):
        return self.text[self.pos:self.pos + n]


    # tokenizing specific object types
    def _number(self) -> Token:
        """
        numbers are kept as strings so no leading or trailing zeros are lost.
        integers are given a fractional part, as GLSL will not promote them
        """
        match = NUMBER_PATTERN.match(self.text, self.pos)
        result = match.group(0)
        if '.' not in result:
            result += '.0'

        token = Token(base.NUMBER, result, self.pos)
        self.advance(match.end() - self.pos)
        return token

    def _negative(self) -> Token:
        prefix = self.peek_text(len(base.NEGATIVE_MARKER))
        if prefix != base.NEGATIVE_MARKER:
            self.error(prefix)

        token = Token(base.NEGATIVE, base.NEGATIVE_MARKER, self.pos)
        self.advance(len(base.NEGATIVE_MARKER))
        return token

    def _keyword(self) -> Token:
        candidates = self.keyword_prefixes[self.current_char]
        for name in candidates:
            if self.peek_text(len(name)) == name:
                token = Token(base.FUNCTION, name, self.pos)
                self.advance(len(name))
                return token

        # single-keyword letters can suggest what was probably meant
        if len(candidates) == 1:
            expected = candidates[0]
            self.error(self.peek_text(len(expected)), expected=expected)
        self.error(self.current_char)

    def _symbol(self, token_type) -> Token:
        token = Token(token_type, self.current_char, self.pos)
        self.advance()
        return token


    # workhorse method
    def next_token(self) -> Token:
        char = self.current_char

        if char == 'x':
            return self._symbol(base.X)

        if char in base.operators:
            return self._symbol(base.operators[char])

        if '0' <= char <= '9':
            return self._number()

        if char == 'n':
            return self._negative()

        if char == '^':
            return self._symbol(base.POWER)

        if char == '(':
            return self._symbol(base.LPARE)

        if char == ')':
            return self._symbol(base.RPARE)

        if char in self.keyword_prefixes:
            return self._keyword()

        self.error(char)
