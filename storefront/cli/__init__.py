"""
Flask CLI command groups.
"""
