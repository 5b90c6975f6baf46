"""
the glslmath parser - builds an expression tree from a token sequence. There is
no grammar table; each (sub)expression is split around a root token chosen by a
single left-to-right precedence scan
"""

from __future__ import annotations

from collections import namedtuple
from typing import Optional, Sequence

import glslmath.parsing.ast as ast
import glslmath.parsing.base as base

from glslmath.parsing.base import Token
from glslmath.errors import (
    UnmatchedGroupError,
    MissingOperandError,
    MissingArgumentError,
    EmptyBodyError,
    UnknownRootError,
    FormulaDepthError
)



DEFAULT_MAX_DEPTH = 250

binary_types = (base.PLUS, base.MINUS, base.MUL, base.DIV, base.POWER)


# the token chosen to split a (sub)expression around
ExpressionRoot = namedtuple('ExpressionRoot', ['type', 'index', 'precedence'])



class FormulaParser(object):
    """
    Every method works on the half-open token range [start, end) of the one token
    tuple the parser was created with, so building a subtree never copies tokens
    """

    def __init__(
        self,
        tokens: Sequence[Token],
        max_depth: int = DEFAULT_MAX_DEPTH
    ):
        self.tokens = tuple(tokens)
        self.max_depth = max_depth
        self._closing = self._pair_groups()

    def _pair_groups(self) -> list:
        """
        index of the matching RPARE for every LPARE, or None for opens that are
        never closed. Unmatched closes are left for the root scan to report
        """
        closing = [None] * len(self.tokens)
        opened = list()
        for i, token in enumerate(self.tokens):
            if token.type == base.LPARE:
                opened.append(i)
            elif token.type == base.RPARE and opened:
                closing[opened.pop()] = i
        return closing

    def parse(self) -> Optional[ast.AST]:
        return self.build(0, len(self.tokens))


    #
    # group matching
    #
    def matching_close(self, index: int, end: int) -> int:
        close = self._closing[index]
        if close is None or close >= end:
            raise UnmatchedGroupError(self.tokens[index], index)
        return close

    def function_close(self, index: int, end: int) -> int:
        """
        a function keyword must be directly followed by its parenthesized
        argument. returns the index of the argument's closing parenthesis
        """
        open_index = index + 1
        if open_index >= end or self.tokens[open_index].type != base.LPARE:
            raise MissingArgumentError(self.tokens[index], index)
        return self.matching_close(open_index, end)


    #
    # root selection
    #
    def next_candidate_index(self, index: int, end: int) -> int:
        # functions and groups are atomic, so the scan jumps past them
        token_type = self.tokens[index].type
        if token_type == base.FUNCTION:
            return self.function_close(index, end) + 1
        if token_type == base.LPARE:
            return self.matching_close(index, end) + 1
        return index + 1

    def find_root(self, start: int, end: int) -> Optional[ExpressionRoot]:
        """
        choose the token to split [start, end) around. A later token only
        replaces the candidate when its precedence is strictly greater, so ties
        keep the left-most token

        Parameters
        ----------
        start : int
            first token index of the range
        end : int
            one past the last token index of the range

        Returns
        -------
        ExpressionRoot, or None if the range is empty
        """
        candidate = None
        i = start
        while i < end:
            token = self.tokens[i]
            if token.type == base.RPARE:
                raise UnmatchedGroupError(token, i)

            rank = base.precedence(token)
            if candidate is None or rank > candidate.precedence:
                candidate = ExpressionRoot(token.type, i, rank)

            i = self.next_candidate_index(i, end)

        return candidate


    #
    # tree building
    #
    def build(self, start: int, end: int, depth: int = 0) -> Optional[ast.AST]:
        """
        build the tree of [start, end). Right operands, negated operands and
        implicit-multiplication remainders all extend the range to the right of
        the root, so they are collected in a loop and folded afterwards. Only
        left operands and parenthesized bodies recurse, which keeps `depth` a
        measure of nesting rather than of formula length
        """
        if depth > self.max_depth:
            raise FormulaDepthError(self.max_depth)

        # (kind, op, left, token, index) for every root still waiting on the
        #    tree of the range to its right
        pending = list()

        while True:
            root = self.find_root(start, end)
            if root is None:
                break

            index = root.index
            token = self.tokens[index]

            if token.type in binary_types:
                left = self.build(start, index, depth + 1)
                pending.append(('binary', token.type, left, token, index))
                start = index + 1

            elif token.type == base.NEGATIVE:
                left = ast.Num(base.NEGATIVE_ONE)
                pending.append(('negative', base.MUL, left, token, index))
                start = index + 1

            elif token.type == base.X:
                pending.append(('atom', base.MUL, ast.Var(), token, index))
                start = index + 1

            elif token.type == base.NUMBER:
                pending.append(('atom', base.MUL, ast.Num(token.value), token, index))
                start = index + 1

            elif token.type == base.LPARE:
                close = self.matching_close(index, end)
                node = ast.Paren(self.body(index + 1, close, depth))
                pending.append(('atom', base.MUL, node, token, index))
                start = close + 1

            elif token.type == base.FUNCTION:
                close = self.function_close(index, end)
                node = ast.Function(
                    name=token.value,
                    expr=self.body(index + 2, close, depth)
                )
                pending.append(('atom', base.MUL, node, token, index))
                start = close + 1

            else:
                raise UnknownRootError(token, index)

        return self.fold(pending)

    def fold(self, pending: list) -> Optional[ast.AST]:
        """
        join the collected roots right to left, so the right-most operand is
        checked first. an atom with nothing after it stands alone; adjacent
        atoms are multiplied, e.g. '2x' or 'sin(x)cos(x)'
        """
        node = None
        for kind, op, left, token, index in reversed(pending):
            if kind == 'binary' and (left is None or node is None):
                raise MissingOperandError(token, index)

            if kind == 'negative' and node is None:
                raise MissingOperandError(token, index, unary=True)

            if node is None:
                node = left
            else:
                node = ast.BinaryOp(op=op, left=left, right=node)

        return node

    def body(self, start: int, end: int, depth: int) -> ast.AST:
        # the tokens strictly between a pair of parentheses
        node = self.build(start, end, depth + 1)
        if node is None:
            raise EmptyBodyError(start - 1, end)
        return node
