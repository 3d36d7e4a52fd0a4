"""Book schemas."""

from pydantic import BaseModel, Field


class BookCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)


class BookAdded(BaseModel):
    title: str
    added: bool


class BookAvailability(BaseModel):
    title: str
    available: bool


class BookList(BaseModel):
    titles: list[str]
