"""
API package containing the HTTP routes.

``router`` aggregates the domain routers; ``deps`` exposes the
dependencies that hand each request the services built at startup.
"""
