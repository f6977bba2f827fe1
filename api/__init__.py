"""
HTTP API layer: routes and request-scoped dependencies.
"""
