"""
mirrorfind: web front end for searching files mirrored across servers.
"""

__version__ = "0.1.0"
