"""Lexeme scanners for the linscan lexer.

Each scanner is a mixin that recognizes one lexeme class once the
dispatch loop has classified its leading character.
"""

from __future__ import annotations

from linscan.lexer.scanners.name import NameScannerMixin
from linscan.lexer.scanners.number import NumberScannerMixin
from linscan.lexer.scanners.string import StringScannerMixin

__all__ = [
    "NameScannerMixin",
    "NumberScannerMixin",
    "StringScannerMixin",
]
