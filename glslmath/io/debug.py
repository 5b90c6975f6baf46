"""
the diagnostic channel used by the 'debug' compiler option
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.tree import Tree

import glslmath.parsing.base as base

from glslmath.parsing.base import ABCVisitor



console = Console(stderr=True)



def show_tokens(tokens: list):
    table = Table(title='tokens')
    table.add_column('index', justify='right')
    table.add_column('type')
    table.add_column('value')
    table.add_column('column', justify='right')

    for i, token in enumerate(tokens):
        table.add_row(str(i), token.type, repr(token.value), str(token.pos))

    console.print(table)


def show_tree(tree):
    console.print(TreeDisplay(tree))



class TreeDisplay(object):

    def __new__(
        cls,
        tree
    ):
        display = _TreeDisplay(tree)
        return display.display()



class _TreeDisplay(ABCVisitor):
    """
    mirrors the expression tree as a rich Tree, one branch per node. Each
    visit_* method returns the node's label and children; the branches are
    added from an explicit stack so long chains do not recurse
    """

    def display(self) -> Tree:
        root = Tree('expression tree')
        stack = [(self.tree, root)]
        while stack:
            node, parent = stack.pop()
            label, children = self.visit(node)
            branch = parent.add(label)
            stack.extend((child, branch) for child in reversed(children))
        return root

    def visit_BinaryOp(self, node):
        if node.op == base.POWER:
            label = 'pow'
        else:
            label = base.operator_symbols.get(node.op, node.op)
        return f"BinaryOp [bold]{label}[/bold]", (node.left, node.right)

    def visit_Function(self, node):
        return f"Function [bold]{node.name}[/bold]", (node.expr,)

    def visit_Paren(self, node):
        return 'Paren', (node.expr,)

    def visit_Var(self, node):
        return 'Var x', ()

    def visit_Num(self, node):
        return f"Num {node.value}", ()
