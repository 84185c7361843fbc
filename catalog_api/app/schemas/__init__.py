"""
Pydantic schema definitions for the stored records.

Each domain (users, products) defines its own record model.  The same
models are returned by the API inside the response envelope.
"""
