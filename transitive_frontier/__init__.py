"""
transitive-frontier: find where a workspace picks up transitive dependencies
on a given package.
"""

__version__ = "0.1.0"
