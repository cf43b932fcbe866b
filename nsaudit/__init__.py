"""nsaudit - Report assembly namespaces missing from a namespace list."""

__version__ = "0.1.0"
