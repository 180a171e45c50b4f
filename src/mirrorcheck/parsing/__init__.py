"""Metalink document parsing."""

from .parser import MetalinkParser, find_attribute, parse, parse_file

__all__ = ["MetalinkParser", "find_attribute", "parse", "parse_file"]
