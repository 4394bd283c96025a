"""Application service (use case) for Article operations."""

import logging

from blog.application.interfaces import ArticleRepository
from blog.application.schemas import ArticleCreate, ArticleUpdate
from blog.application.services.slug_resolver import SlugResolver
from blog.domain.entities import Article, ArticlePage
from blog.domain.exceptions import EntityNotFoundError
from blog.domain.time import utcnow

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 10


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository, slug_resolver: SlugResolver | None = None):
        self._repository = repository
        self._slugs = slug_resolver or SlugResolver(repository)

    async def get_article(self, identifier: int | str, include_unpublished: bool = False) -> Article:
        """Look an article up by slug, falling back to a numeric ID.

        Unpublished articles are reported as missing unless
        ``include_unpublished`` is set (admin callers).
        """
        article = await self._find(identifier)
        if article is None or (not article.is_published and not include_unpublished):
            raise EntityNotFoundError("Article", identifier)
        return article

    async def list_articles(
        self,
        *,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        published: bool | None = None,
        search: str | None = None,
        include_unpublished: bool = False,
    ) -> ArticlePage:
        limit = min(max(limit, 1), MAX_PAGE_SIZE)
        page = max(page, 1)

        if not include_unpublished:
            published = True
        search = search.strip() if search else None

        items = await self._repository.get_all(
            published=published,
            search=search or None,
            skip=(page - 1) * limit,
            limit=limit,
        )
        total = await self._repository.count(published=published, search=search or None)
        return ArticlePage(items=items, total=total, page=page, limit=limit)

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(
            title=data.title,
            content=data.content,
            is_published=data.is_published,
        )
        if data.published_date is not None:
            article.published_date = data.published_date
        article.slug = await self._slugs.resolve(article.title)

        created = await self._repository.create(article)
        logger.info("Created article %s (%s)", created.id, created.slug)
        return created

    async def update_article(self, identifier: int | str, data: ArticleUpdate) -> Article:
        article = await self.get_article(identifier, include_unpublished=True)

        published_date = utcnow() if data.reset_published_date else data.published_date
        title_changed = article.update(
            title=data.title,
            content=data.content,
            is_published=data.is_published,
            published_date=published_date,
        )
        if title_changed or not article.slug:
            article.slug = await self._slugs.resolve(article.title, exclude_id=article.id)

        return await self._repository.update(article)

    async def delete_article(self, identifier: int | str) -> Article:
        article = await self.get_article(identifier, include_unpublished=True)
        await self._repository.delete(article.id)
        logger.info("Deleted article %s (%s)", article.id, article.slug)
        return article

    async def _find(self, identifier: int | str) -> Article | None:
        if isinstance(identifier, int):
            return await self._repository.get_by_id(identifier)

        key = identifier.strip().lower()
        if not key:
            return None
        article = await self._repository.get_by_slug(key)
        if article is None and key.isascii() and key.isdigit() and len(key) <= 18:
            article = await self._repository.get_by_id(int(key))
        return article
