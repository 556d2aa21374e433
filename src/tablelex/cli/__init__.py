"""
tablelex Command-Line Interface
===============================

This package provides the ``tlex`` command-line tool, implemented as a
Click-based CLI application with unified error reporting and exit codes.
"""

__all__ = ["tlex"]
