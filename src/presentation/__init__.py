"""
Outer surfaces: HTTP API, CLI and the service container.
"""
