"""
Proxy services: payload building, upstream adapters, secret lookup and the request lifecycle.
"""
