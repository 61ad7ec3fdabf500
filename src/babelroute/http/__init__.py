"""Request boundary — the routing view of an incoming HTTP request."""
