"""
calcengine Package

A small arithmetic expression engine: text goes in, a float (or None)
comes out.

Architecture:
    calcengine/
    ├── lexer/           # Tokenization and token repair
    ├── parser/          # Recursive descent parsing and AST nodes
    ├── evaluator/       # Tree evaluation
    └── engine.py        # evaluate() entry point

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .engine import evaluate, tokenize
from .lexer import Lexer, LexerError, RepairError
from .parser import Parser, ParseError
from .evaluator import Evaluator

__all__ = [
    # Entry points
    "evaluate",
    "tokenize",

    # Pipeline stages
    "Lexer",
    "Parser",
    "Evaluator",

    # Errors
    "LexerError",
    "RepairError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
