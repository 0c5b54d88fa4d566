"""Parser for coefficient literals.

The polynomial parser hands two kinds of text to a ring's `parse` method: bare
numbers like `12` or `1.5`, and the inside of a bracketed coefficient such as
`{3/4}` or `{1-2i}`.  The built-in rings understand the little language below:

    literal   ::= real
                | real "/" NUM
                | real ("+" | "-") imaginary
                | ("+" | "-")? imaginary
    real      ::= ("+" | "-")? NUM
    imaginary ::= NUM? ("i" | "j")

NUM is a decimal number with an optional exponent (`2`, `0.25`, `.5`, `1e-9`).
Real values come back as exact `Fraction`s and anything with an imaginary part
comes back as a `complex`.

The important functions are:
 - parse_literal: str -> Fraction | complex
 - tokenize:      str -> token stream
"""

# builtin
import copy
from fractions import Fraction
import threading

# 3rd party
from ply import lex, yacc

class LiteralError(ValueError):
    def __init__(self, position, msg):
        self.position = position
        super().__init__("{} (at offset {})".format(msg, position))

# Lexer ########################################################################

tokens = ("NUM", "IMAG", "OP_PLUS", "OP_MINUS", "OP_SLASH")

def make_lexer():
    t_IMAG = r"[ij]"
    t_OP_PLUS = r"\+"
    t_OP_MINUS = r"-"
    t_OP_SLASH = r"/"

    def t_NUM(t):
        r"(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?"
        t.value = Fraction(t.value)
        return t

    t_ignore = " \t\n"

    def t_error(t):
        raise LiteralError(t.lexpos, "illegal character {!r}".format(t.value[0]))

    return lex.lex()

# Parser #######################################################################

def _float(value, position):
    try:
        return float(value)
    except OverflowError:
        raise LiteralError(position, "number too large for a float")

def make_parser():
    start = "literal"

    def p_literal(p):
        """literal : real
                   | real OP_SLASH NUM
                   | real OP_PLUS imaginary
                   | real OP_MINUS imaginary
                   | imaginary
                   | OP_PLUS imaginary
                   | OP_MINUS imaginary"""
        if len(p) == 2:
            p[0] = p[1]
        elif len(p) == 3:
            p[0] = -p[2] if p[1] == "-" else p[2]
        elif p[2] == "/":
            if p[3] == 0:
                raise LiteralError(p.lexpos(3), "zero denominator")
            p[0] = p[1] / p[3]
        elif p[2] == "+":
            p[0] = complex(_float(p[1], p.lexpos(2)), 0) + p[3]
        else:
            p[0] = complex(_float(p[1], p.lexpos(2)), 0) - p[3]

    def p_real(p):
        """real : NUM
                | OP_PLUS NUM
                | OP_MINUS NUM"""
        if len(p) == 2:
            p[0] = p[1]
        else:
            p[0] = -p[2] if p[1] == "-" else p[2]

    def p_imaginary(p):
        """imaginary : NUM IMAG
                     | IMAG"""
        p[0] = complex(0, _float(p[1], p.lexpos(1))) if len(p) == 3 else complex(0, 1)

    def p_error(p):
        if p is None:
            raise LiteralError(-1, "unexpected end of literal")
        raise LiteralError(p.lexpos, "unexpected {!r}".format(p.value))

    return yacc.yacc(debug=False, write_tables=False, errorlog=yacc.NullLogger())

# Both tables are built on first use and never modified afterwards.  Parsing
# works on private copies, so only construction needs the lock.
_lock = threading.Lock()
_lexer = None
_parser = None

def _tables():
    global _lexer, _parser
    if _parser is None:
        with _lock:
            if _parser is None:
                _lexer = make_lexer()
                _parser = make_parser()
    return _lexer, _parser

def tokenize(s):
    lexer = _tables()[0].clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

def parse_literal(s):
    """Parse a coefficient literal, returning a Fraction or a complex."""
    lexer, parser = _tables()
    if not s.strip():
        raise LiteralError(0, "empty literal")
    return copy.copy(parser).parse(s, lexer=lexer.clone())
