"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence: implemented in the infrastructure layer.

    Implementations must enforce slug uniqueness at write time and raise
    ``DuplicateEntityError`` when a create or update collides.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Article | None:
        """Retrieve a single article by its slug."""
        ...

    @abstractmethod
    async def slug_exists(self, slug: str, exclude_id: int | None = None) -> bool:
        """True if an article other than ``exclude_id`` already holds ``slug``."""
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        published: bool | None = None,
        search: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[Article]:
        """Retrieve articles, newest published_date first."""
        ...

    @abstractmethod
    async def count(
        self,
        *,
        published: bool | None = None,
        search: str | None = None,
    ) -> int:
        """Count articles matching the same filters as get_all."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Update an existing article."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
