"""
Core arithmetic, parsers, domain models and contracts.

Everything here is pure and independent of I/O.
"""
