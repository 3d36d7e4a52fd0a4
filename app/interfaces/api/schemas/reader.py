from pydantic import BaseModel


class ReaderCategoryRead(BaseModel):
    books_read: int
    category: str
