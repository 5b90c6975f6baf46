"""
module with token types, reserved function names, and the visitor base class
used throughout the glslmath pipeline
"""

from __future__ import annotations

from collections import namedtuple

from glslmath.errors import FormulaRenderError



X        = 'X'
NUMBER   = 'NUMBER'
FUNCTION = 'FUNCTION'
NEGATIVE = 'NEGATIVE'

LPARE    = 'LPARE'
RPARE    = 'RPARE'

PLUS     = 'PLUS'
MINUS    = 'MINUS'
MUL      = 'MUL'
DIV      = 'DIV'
POWER    = 'POWER'


# reserved function names
SIN     = 'sin'
COS     = 'cos'
TAN     = 'tan'
ASIN    = 'asin'
ACOS    = 'acos'
ATAN    = 'atan'
LOG     = 'log'
ABS     = 'abs'
CEIL    = 'ceil'
FLOOR   = 'floor'
ROUND   = 'round'
SQRT    = 'sqrt'


# the text the lexer substitutes for a '-' that touches its operand
NEGATIVE_MARKER = 'neg'

PI_LITERAL = '3.14159265359'
E_LITERAL = '2.71828182846'
NEGATIVE_ONE = '-1.0'


class Token(namedtuple('Token', ['type', 'value', 'pos'], defaults=(None,))):
    """
    a single lexical token. `pos` is the column of the normalized formula text
    the token starts at, and is only used for error reporting
    """

    __slots__ = ()

    def __str__(self):
        return f"Token[{self.type}, {self.value}, {self.pos}]"

    def __repr__(self):
        return f"Token[{self.type}, {repr(self.value)}]"


operators = {
    '+': PLUS,
    '-': MINUS,
    '*': MUL,
    '/': DIV
}

operator_symbols = {v: k for k, v in operators.items()}

trig_funcs = frozenset((SIN, COS, TAN, ASIN, ACOS, ATAN))

reserved_funcs = frozenset(trig_funcs | {LOG, ABS, CEIL, FLOOR, ROUND, SQRT})


def precedence(token: Token) -> int:
    """
    rank used when choosing the root of a (sub)expression. a higher rank binds
    more loosely, so it is split on first

    Parameters
    ----------
    token : Token
        the token to rank

    Returns
    -------
    int
    """
    if token.type in (PLUS, MINUS):
        return 3
    if token.type in (MUL, DIV, POWER):
        return 2
    return 1


class ABCVisitor(object):
    """ Abstract Base Class for expression tree visitors """

    def __init__(self, tree):
        self.tree = tree

    def visit(self, node):
        # using the node's class name to visit the appropriate method
        method = 'visit_' + type(node).__name__
        visitor = getattr(self, method, self._nonexistent_node)
        return visitor(node)

    def _nonexistent_node(self, node):
        raise FormulaRenderError(node)
