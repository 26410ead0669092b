"""
Application services and handlers.
"""
