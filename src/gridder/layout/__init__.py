"""Grid layout language: named regions in an ASCII grid."""

from .parser import Region, RegionRegistry, parse_layout
from .tokenizer import Token, TokenKind, tokenize

__all__ = ["Region", "RegionRegistry", "Token", "TokenKind", "parse_layout", "tokenize"]
