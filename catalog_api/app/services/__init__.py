"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works on
the collections of a ``DataStore`` passed to it, so handlers never
reach for module-level state.
"""
