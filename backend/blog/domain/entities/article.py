"""Domain entities: pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from blog.domain.time import ensure_utc, utcnow


@dataclass
class Article:
    """Core domain entity representing a blog article."""

    title: str
    content: str
    slug: str = ""
    is_published: bool = False
    published_date: datetime = field(default_factory=utcnow)
    id: int | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def update(
        self,
        title: str | None = None,
        content: str | None = None,
        is_published: bool | None = None,
        published_date: datetime | None = None,
    ) -> bool:
        """Apply the given fields and bump updated_at.

        Returns True when the title actually changed, which is the only
        edit that calls for a new slug.
        """
        title_changed = title is not None and title != self.title
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
        if is_published is not None:
            self.is_published = is_published
        if published_date is not None:
            self.published_date = published_date
        self.touch()
        return title_changed

    def touch(self) -> None:
        """Move updated_at forward, strictly past its previous value."""
        now = utcnow()
        previous = ensure_utc(self.updated_at)
        if previous is not None and now <= previous:
            now = previous + timedelta(microseconds=1)
        self.updated_at = now


@dataclass
class ArticlePage:
    """One page of an article listing plus the totals needed to paginate."""

    items: list[Article]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.limit) if self.limit else 0

    @property
    def has_more(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1
