"""
Storage adapters.
"""
