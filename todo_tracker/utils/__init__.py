"""
Shared utilities: configuration, logging, locking and API responses.
"""
