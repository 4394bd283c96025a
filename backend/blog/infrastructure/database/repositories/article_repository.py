"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import ArticleRepository
from blog.domain.entities import Article
from blog.domain.exceptions import DuplicateEntityError
from blog.domain.time import ensure_utc
from blog.infrastructure.database.models import ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            slug=model.slug,
            content=model.content,
            is_published=model.is_published,
            published_date=ensure_utc(model.published_date),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            slug=entity.slug,
            content=entity.content,
            is_published=entity.is_published,
            published_date=entity.published_date,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _filtered(self, stmt, published: bool | None, search: str | None):
        if published is not None:
            stmt = stmt.where(ArticleModel.is_published == published)
        if search:
            stmt = stmt.where(
                or_(
                    ArticleModel.title.icontains(search, autoescape=True),
                    ArticleModel.content.icontains(search, autoescape=True),
                )
            )
        return stmt

    async def _flush(self, slug: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if "slug" in str(exc.orig).lower():
                raise DuplicateEntityError("Article", "slug", slug) from exc
            raise

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_by_slug(self, slug: str) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def slug_exists(self, slug: str, exclude_id: int | None = None) -> bool:
        stmt = select(ArticleModel.id).where(ArticleModel.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(ArticleModel.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        return result.first() is not None

    async def get_all(
        self,
        *,
        published: bool | None = None,
        search: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[Article]:
        stmt = self._filtered(select(ArticleModel), published, search)
        stmt = stmt.order_by(
            ArticleModel.published_date.desc(),
            ArticleModel.created_at.desc(),
        ).offset(skip).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(
        self,
        *,
        published: bool | None = None,
        search: str | None = None,
    ) -> int:
        stmt = self._filtered(select(func.count()).select_from(ArticleModel), published, search)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._flush(article.slug)
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.slug = article.slug
        model.content = article.content
        model.is_published = article.is_published
        model.published_date = article.published_date
        model.updated_at = article.updated_at
        await self._flush(article.slug)
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
