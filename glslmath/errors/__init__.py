"""
glslmath errors
"""
from __future__ import annotations



class GlslMathError(Exception):
    pass



class FormulaLexicalError(GlslMathError):
    def __init__(self, symbol: str, remaining: str, pos: int, expected: str = None):
        self.symbol = symbol
        self.remaining = remaining
        self.pos = pos

        msg = f"unhandled sequence: {repr(symbol)} in {repr(remaining)} at column {pos}"
        if expected is not None:
            msg = f"{msg}, did you mean {repr(expected)}?"
        super().__init__(msg)



class FormulaStructureError(GlslMathError):
    pass



class UnmatchedGroupError(FormulaStructureError):
    def __init__(self, token, index: int):
        self.token = token
        self.index = index

        if token.value == ')':
            msg = (
                f"closing parenthesis at token {index} (column {token.pos}) "
                "does not have a matching open parenthesis"
            )
        else:
            msg = (
                f"could not find matching close parenthesis for {repr(token.value)} "
                f"at token {index} (column {token.pos})"
            )
        super().__init__(msg)



class MissingOperandError(FormulaStructureError):
    def __init__(self, token, index: int, unary: bool = False):
        self.token = token
        self.index = index

        side = 'a right hand side' if unary else 'left and right hand sides'
        msg = (
            f"{repr(token.value)} at token {index} (column {token.pos}) "
            f"expects {side}"
        )
        super().__init__(msg)



class MissingArgumentError(FormulaStructureError):
    def __init__(self, token, index: int):
        self.token = token
        self.index = index

        msg = (
            f"function {repr(token.value)} at token {index} (column {token.pos}) "
            "expects a parenthesized argument"
        )
        super().__init__(msg)



class EmptyBodyError(FormulaStructureError):
    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end

        msg = f"missing body between parentheses at tokens {start} and {end}"
        super().__init__(msg)



class UnknownRootError(FormulaStructureError):
    def __init__(self, token, index: int):
        self.token = token
        self.index = index

        msg = f"could not complete parsing of expression: {repr(token.type)} at token {index}"
        super().__init__(msg)



class FormulaDepthError(FormulaStructureError):
    def __init__(self, max_depth: int):
        self.max_depth = max_depth

        msg = (
            f"formula nesting exceeds the maximum depth of {max_depth}. "
            "increase 'max_depth' to compile it"
        )
        super().__init__(msg)



class FormulaRenderError(GlslMathError):
    def __init__(self, node):
        self.node = node

        msg = f"unsupported compile operation: {repr(node)}"
        super().__init__(msg)
