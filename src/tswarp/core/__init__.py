"""
Core domain models, mathematical primitives, and contracts.

This package contains the DTW kernel and everything it needs, independent
of file formats and the command line.
"""
