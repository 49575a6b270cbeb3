"""Classic programming drills as functions: arithmetic, number theory, patterns, arrays, matrices and strings."""

__version__ = "1.0.0"
__all__ = ["arithmetic", "numtheory", "patterns", "arrays", "matrices", "strings"]