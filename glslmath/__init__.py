"""
glslmath - compiles human-readable formulas in 'x' to GLSL arithmetic
"""

from glslmath.parsing import (
    tokenize,
    find_root,
    parse_tokens,
    parse_string,
    render,
    compile_formula
)
from glslmath.options import CompilerOptions
from glslmath.errors import (
    GlslMathError,
    FormulaLexicalError,
    FormulaStructureError,
    FormulaRenderError
)
