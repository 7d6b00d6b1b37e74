"""
Small helpers shared across the front end.
"""
