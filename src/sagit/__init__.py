"""Sagit - semantic change intelligence for git repositories."""

__version__ = "0.1.0"
