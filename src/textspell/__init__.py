"""textspell: report words missing from a word list, with line:column positions."""

__version__ = "0.1.0"
