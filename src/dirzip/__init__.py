"""
dirzip: one password-protected ZIP archive per entry of a directory.
"""

__version__ = "0.1.0"
