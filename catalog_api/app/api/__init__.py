"""
API package containing the routes.

``router`` aggregates the domain routers defined in ``endpoints`` and
is mounted under ``/api`` by ``main.create_app``.
"""
