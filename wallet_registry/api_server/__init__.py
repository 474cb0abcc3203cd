"""
API server package — HTTP interface.

Serves the landing and registration pages and POST /register, which
delegates to the registration service with an injected store.
"""
