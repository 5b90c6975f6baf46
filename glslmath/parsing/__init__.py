from glslmath.parsing.api import (
    tokenize,
    find_root,
    parse_tokens,
    parse_string,
    render,
    compile_formula
)
