"""
Pydantic models for user data.

``User`` is the stored record and also what the API returns.  Request
bodies are read leniently by the endpoints (see ``services.user_service``)
and turned into ``User`` instances only once the required fields are
known to be present.
"""

from pydantic import BaseModel, Field

DEFAULT_ROLE = "user"


class User(BaseModel):
    """A user record."""

    id: int = Field(..., gt=0, examples=[1])
    name: str = Field(..., examples=["John Doe"])
    email: str = Field(..., examples=["john@example.com"])
    role: str = Field(DEFAULT_ROLE, examples=["admin"])
