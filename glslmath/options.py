"""
options accepted by compile_formula
"""

from __future__ import annotations

from collections import abc

from glslmath.parsing.parser import DEFAULT_MAX_DEPTH



class CompilerOptions(object):
    """
    Parameters
    ----------
    debug : bool ( = False )
        print the token sequence and the expression tree to stderr. has no
        effect on the compiled result
    max_depth : int ( = 250 )
        the deepest nesting of subexpressions the parser will build before
        giving up with a FormulaDepthError
    """

    recognized = ('debug', 'max_depth')

    def __init__(
        self,
        debug: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH
    ):
        # an unset 'debug' means no debugging
        if debug is None:
            debug = False
        if not isinstance(debug, bool):
            raise ValueError(f"'{debug}'. 'debug' must be a bool")
        self.debug = debug

        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
            raise ValueError(f"'{max_depth}'. 'max_depth' must be a positive int")
        self.max_depth = max_depth

    @classmethod
    def from_value(cls, options) -> CompilerOptions:
        """
        build options from None, a mapping of option names to values, or an
        existing CompilerOptions
        """
        if options is None:
            return cls()

        if isinstance(options, cls):
            return options

        if isinstance(options, abc.Mapping):
            unknown = [k for k in options if k not in cls.recognized]
            if unknown:
                raise ValueError(
                    f"unrecognized option(s): {', '.join(map(repr, unknown))}. "
                    f"accepted options are {', '.join(map(repr, cls.recognized))}"
                )
            return cls(**options)

        raise ValueError(
            f"options must be a mapping or CompilerOptions, not {type(options).__name__}"
        )

    def __repr__(self):
        return f"CompilerOptions(debug={self.debug}, max_depth={self.max_depth})"
