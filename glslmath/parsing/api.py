"""
forward-facing functions for compiling formulas to GLSL
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Union

from glslmath.parsing.ast import AST
from glslmath.parsing.base import Token
from glslmath.parsing.lexer import FormulaLexer
from glslmath.parsing.parser import FormulaParser, ExpressionRoot, DEFAULT_MAX_DEPTH
from glslmath.parsing.renderer import GlslRenderer
from glslmath.options import CompilerOptions
from glslmath.io import debug



def tokenize(formula: str) -> list:
    """
    normalize a formula and split it into tokens

    Parameters
    ----------
    formula : str
        a formula in the single variable 'x'

    Returns
    -------
    list of Token
    """
    lexer = FormulaLexer(formula)
    return lexer.tokenize()



def find_root(tokens: Sequence[Token]) -> Optional[ExpressionRoot]:
    """
    the token the whole sequence would be split around; None for no tokens
    """
    parser = FormulaParser(tokens)
    return parser.find_root(0, len(parser.tokens))



def parse_tokens(
    tokens: Sequence[Token],
    max_depth: int = DEFAULT_MAX_DEPTH
) -> Optional[AST]:
    """
    build the expression tree of a token sequence

    Parameters
    ----------
    tokens : Sequence[Token]
        the output of `tokenize`
    max_depth : int ( = 250 )
        deepest subexpression nesting to build before raising FormulaDepthError

    Returns
    -------
    AST, or None if `tokens` is empty
    """
    parser = FormulaParser(tokens, max_depth=max_depth)
    return parser.parse()



def parse_string(
    formula: str,
    max_depth: int = DEFAULT_MAX_DEPTH
) -> Optional[AST]:
    """
    a top-level function for translating a formula in string form to an
    expression tree, without rendering it

    Parameters
    ----------
    formula : str
        a formula in the single variable 'x'
    max_depth : int ( = 250 )
        deepest subexpression nesting to build before raising FormulaDepthError

    Returns
    -------
    AST, or None if the formula has no tokens
    """
    return parse_tokens(tokenize(formula), max_depth=max_depth)



def render(tree: AST) -> str:
    """
    write an expression tree as GLSL arithmetic, without inserting whitespace
    """
    return GlslRenderer(tree)



def compile_formula(
    formula: str,
    options: Union[Mapping, CompilerOptions] = None
) -> str:
    """
    The top-level function for translating a formula such as 'x^sin(x)cos(x)'
    into GLSL such as 'pow(x,sin(x)*cos(x))'

    Parameters
    ----------
    formula : str
        a formula in the single variable 'x'
    options : Mapping | CompilerOptions ( = None )
        'debug' and 'max_depth'. see CompilerOptions

    Returns
    -------
    the GLSL expression, or an empty string if the formula has no tokens
    """
    options = CompilerOptions.from_value(options)

    tokens = tokenize(formula)
    if options.debug:
        debug.show_tokens(tokens)

    tree = parse_tokens(tokens, max_depth=options.max_depth)
    if tree is None:
        return ''

    if options.debug:
        debug.show_tree(tree)

    return render(tree)
