"""
HTTP routers for todos and labels.
"""
