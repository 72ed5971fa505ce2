"""
Route handlers.
"""
