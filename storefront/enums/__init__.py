from enum import Enum


class SortField(str, Enum):
    PRICE = "price"
    LATEST = "latest"
    LIKES = "likes"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class CategorySource(str, Enum):
    COLLECTION = "collection"
    ITEMS = "items"
