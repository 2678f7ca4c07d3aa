"""
API package containing the HTTP routes.

``router`` aggregates the endpoint routers; ``deps`` provides the
dependencies that hand shared state to handlers.
"""
