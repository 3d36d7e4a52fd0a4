"""User schemas."""

from pydantic import BaseModel


class UserNameRead(BaseModel):
    id: str
    name: str
