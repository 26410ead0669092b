"""
Pure domain logic for archive search.
"""
