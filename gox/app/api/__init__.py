"""
API package containing the HTTP routes.

The routes are unversioned; ``router`` aggregates the domain
routers defined in ``endpoints``.
"""
