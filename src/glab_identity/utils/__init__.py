"""
Shared utilities: subprocess execution and git configuration access.
"""
