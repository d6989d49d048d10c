"""
Todo tracker: todos, labels and the repositories that persist them.
"""

__version__ = "0.1.0"
