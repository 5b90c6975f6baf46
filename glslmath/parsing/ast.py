"""
expression tree nodes. Nodes are built once by the parser, read once by the
renderer, and cannot be modified in between
"""

from __future__ import annotations



class AST(object):

    __slots__ = ()
    _fields = ()

    def __init__(self, **kwargs):
        for field in self._fields:
            object.__setattr__(self, field, kwargs[field])

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} nodes are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} nodes are immutable")

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self._fields)

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(getattr(self, f) for f in self._fields))

    def __repr__(self):
        args = ', '.join(repr(getattr(self, f)) for f in self._fields)
        return f"{type(self).__name__}({args})"



class BinaryOp(AST):
    """
    `op` is one of the PLUS, MINUS, MUL, DIV, or POWER token types
    """

    __slots__ = ('op', 'left', 'right')
    _fields = ('op', 'left', 'right')

    def __init__(self, op: str, left: AST, right: AST):
        super().__init__(op=op, left=left, right=right)



class Function(AST):

    __slots__ = ('name', 'expr')
    _fields = ('name', 'expr')

    def __init__(self, name: str, expr: AST):
        super().__init__(name=name, expr=expr)



class Paren(AST):

    __slots__ = ('expr',)
    _fields = ('expr',)

    def __init__(self, expr: AST):
        super().__init__(expr=expr)



class Var(AST):

    __slots__ = ()

    def __init__(self):
        super().__init__()



class Num(AST):

    __slots__ = ('value',)
    _fields = ('value',)

    def __init__(self, value: str):
        super().__init__(value=value)
