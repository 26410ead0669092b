"""
Cross-cutting concerns: exceptions, logging and validation.
"""
