from .book import BookAdded, BookAvailability, BookCreate, BookList
from .pricing import DiscountRequest, DiscountResponse
from .reader import ReaderCategoryRead
from .user import UserNameRead

__all__ = [
    "BookAdded",
    "BookAvailability",
    "BookCreate",
    "BookList",
    "DiscountRequest",
    "DiscountResponse",
    "ReaderCategoryRead",
    "UserNameRead",
]
