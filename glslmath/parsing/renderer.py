"""
walking an expression tree to produce GLSL-compatible arithmetic
"""

from __future__ import annotations

import glslmath.parsing.ast as ast
import glslmath.parsing.base as base

from glslmath.parsing.base import ABCVisitor
from glslmath.errors import FormulaRenderError



class GlslRenderer(object):

    def __new__(
        cls,
        tree
    ):
        renderer = _GlslRenderer(tree)
        return renderer.render()



class _GlslRenderer(ABCVisitor):

    def render(self) -> str:
        return self.visit(self.tree)

    def visit_BinaryOp(self, node):
        # long sums and products nest to the right, so the right spine is
        #    walked in a loop and the 'pow(' calls are closed at the end
        parts = list()
        unclosed = 0
        while isinstance(node, ast.BinaryOp):
            left = self.visit(node.left)

            if node.op == base.POWER:
                parts.append(f"pow({left},")
                unclosed += 1
            else:
                try:
                    symbol = base.operator_symbols[node.op]
                except KeyError:
                    raise FormulaRenderError(node)
                parts.append(left + symbol)

            node = node.right

        parts.append(self.visit(node))
        return ''.join(parts) + ')' * unclosed

    def visit_Function(self, node):
        return f"{node.name}({self.visit(node.expr)})"

    def visit_Paren(self, node):
        return f"({self.visit(node.expr)})"

    def visit_Var(self, node):
        return 'x'

    def visit_Num(self, node):
        return node.value
