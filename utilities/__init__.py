"""
Shared utilities: environment configuration and structured logging.
"""
