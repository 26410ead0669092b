"""
Discord message archive search.
"""

__version__ = "1.0.0"
