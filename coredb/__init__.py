"""Column models, where clauses and read/write routed database access."""

__version__ = "0.1.0"

__all__ = ["columns", "engine", "errors", "helpers", "params", "query", "scan"]