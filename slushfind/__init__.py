"""Sizes, costs, security estimates and a ranked search for SLH-DSA parameter sets."""

__version__ = "0.1.0"
__all__ = ["__version__"]