"""Fuzzy string scorers (Indel, Damerau-Levenshtein, Jaro, prefix/postfix) and prompt extraction from image metadata."""

__version__ = "0.1.0"