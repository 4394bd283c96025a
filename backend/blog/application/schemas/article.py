"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field, StrictBool, field_validator, model_validator

from blog.domain.time import ensure_utc, utcnow

TITLE_MAX_LENGTH = 200
_NON_NULLABLE_UPDATE_FIELDS = frozenset({"title", "content", "is_published"})


def _reject_future(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    value = ensure_utc(value)
    if value > utcnow():
        raise ValueError("Published date cannot be in the future")
    return value


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, examples=["Hello World"])
    content: str = Field(..., min_length=1, examples=["# Hello\n\nFirst post."])
    is_published: StrictBool = False
    published_date: datetime | None = None

    model_config = {"str_strip_whitespace": True}

    @field_validator("published_date")
    @classmethod
    def _published_date_not_in_future(cls, value: datetime | None) -> datetime | None:
        return _reject_future(value)


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article: all fields optional.

    Sending ``published_date: null`` explicitly resets the date to now.
    """

    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str | None = Field(None, min_length=1)
    is_published: StrictBool | None = None
    published_date: datetime | None = None

    model_config = {"str_strip_whitespace": True}

    @field_validator("published_date")
    @classmethod
    def _published_date_not_in_future(cls, value: datetime | None) -> datetime | None:
        return _reject_future(value)

    @model_validator(mode="after")
    def _at_least_one_field(self) -> "ArticleUpdate":
        if not self.model_fields_set:
            raise ValueError("No valid fields provided for update")
        # Only published_date has a meaning for null (reset to now)
        nulled = sorted(
            name
            for name in self.model_fields_set & _NON_NULLABLE_UPDATE_FIELDS
            if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self

    @property
    def reset_published_date(self) -> bool:
        return "published_date" in self.model_fields_set and self.published_date is None


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    slug: str
    content: str
    published_date: datetime
    is_published: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ArticleSummary(BaseModel):
    """Listing row: everything except the article body."""

    id: int
    title: str
    slug: str
    published_date: datetime
    is_published: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PaginationMeta(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int
    has_more: bool
    has_previous: bool


class ListFilters(BaseModel):
    published: str = "all"
    search: str = ""


class ArticleListResponse(BaseModel):
    articles: list[ArticleSummary]
    pagination: PaginationMeta
    filters: ListFilters
