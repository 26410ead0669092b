"""
Infrastructure adapters: configuration, search backend, user directory, caches.
"""
