"""Slug assignment with sequential collision probing."""

import logging

from blog.application.interfaces import ArticleRepository
from blog.domain.slug import slugify_title

logger = logging.getLogger(__name__)


class SlugResolver:
    """Turns a title into a slug no other article currently holds.

    Only reads from the repository; the caller stores the returned slug
    together with the rest of the article. The unique index on the slug
    column remains the final guard against concurrent writers.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def resolve(self, title: str, exclude_id: int | None = None) -> str:
        base = slugify_title(title)
        if not await self._repository.slug_exists(base, exclude_id=exclude_id):
            return base

        counter = 1
        candidate = f"{base}-{counter}"
        while await self._repository.slug_exists(candidate, exclude_id=exclude_id):
            counter += 1
            candidate = f"{base}-{counter}"

        logger.debug("Slug '%s' taken, using '%s'", base, candidate)
        return candidate
