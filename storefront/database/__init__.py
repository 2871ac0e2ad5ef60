"""
Database access helpers.
"""
