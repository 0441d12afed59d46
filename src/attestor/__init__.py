"""attestor: verify assertions embedded in technical prose."""

__version__ = "0.1.0"
