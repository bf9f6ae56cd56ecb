"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to a
storage interface rather than to a concrete backend, so the in-memory
store can be swapped without changing the API handlers.
"""
