"""
Compiler package.

Provides compile-time transformation of configured attribute criteria into an
immutable CompiledMatcher for fast, lock-free evaluation at runtime.
"""

from filtermatch.compiler.ir import (
    CompiledMatcher,
    Criterion,
    ExactValue,
    KeyOnly,
    MatchMode,
    Pattern,
)
from filtermatch.compiler.compiler import MatcherCompiler, compile_matcher

__all__ = [
    # IR Types
    "CompiledMatcher",
    "Criterion",
    "ExactValue",
    "KeyOnly",
    "MatchMode",
    "Pattern",
    # Compiler
    "MatcherCompiler",
    "compile_matcher",
]
