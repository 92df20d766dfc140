"""
calcdeck - single-purpose financial, health, math and lifestyle calculators.

Every calculator is an isolated component exposing a pure ``run`` function
that maps a frozen input record to an output envelope.
"""

__version__ = "0.1.0"
