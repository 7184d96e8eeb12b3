from typing import ClassVar, Generic, TypeVar
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


# Base for every API-facing schema: camelCase on the wire, snake_case in Python
class CamelModel(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Success envelope
class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data: T | None = None


class PaginationMeta(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


# Success envelope for paginated listings
class PaginatedResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data: list[T] = []
    pagination: PaginationMeta
