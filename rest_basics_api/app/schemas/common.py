"""
Schemas shared by several resources.
"""

from pydantic import BaseModel, Field


class MessageRead(BaseModel):
    """Plain acknowledgement returned by destructive endpoints."""

    message: str = Field(..., examples=["User deleted"])
