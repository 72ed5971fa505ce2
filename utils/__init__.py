"""
Shared utilities: logging, HTTP client, constants.
"""
