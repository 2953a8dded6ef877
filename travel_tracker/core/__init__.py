"""
Core infrastructure: database, tokens, password hashing, validation,
exceptions and error handling.
"""
