"""Diagnostics package.

- accuracy: error survey against a float64 reference (requires numpy)
"""

__all__ = ["accuracy"]
