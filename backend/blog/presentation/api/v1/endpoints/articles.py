"""Article CRUD endpoints.

Reads are public (published articles only) unless a valid admin session
cookie is present; writes require an admin session.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from blog.application.schemas import (
    ArticleCreate,
    ArticleListResponse,
    ArticleResponse,
    ArticleSummary,
    ArticleUpdate,
    ListFilters,
    PaginationMeta,
)
from blog.application.services import ArticleService
from blog.domain.entities import AuthUser
from blog.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from blog.infrastructure.dependencies import get_article_service, get_optional_user, require_admin

router = APIRouter(prefix="/articles", tags=["Articles"])

_CONFLICT_DETAIL = "Article with similar title already exists, please retry"


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    page: int = 1,
    limit: int = 10,
    published: bool | None = Query(None),
    search: str | None = None,
    user: AuthUser | None = Depends(get_optional_user),
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    """List articles, newest first. Drafts are only visible to the admin."""
    result = await service.list_articles(
        page=page,
        limit=limit,
        published=published,
        search=search,
        include_unpublished=user is not None,
    )
    return ArticleListResponse(
        articles=[ArticleSummary.model_validate(a, from_attributes=True) for a in result.items],
        pagination=PaginationMeta(
            total=result.total,
            page=result.page,
            limit=result.limit,
            total_pages=result.total_pages,
            has_more=result.has_more,
            has_previous=result.has_previous,
        ),
        filters=ListFilters(
            published="all" if published is None else str(published).lower(),
            search=search or "",
        ),
    )


@router.get("/{identifier}", response_model=ArticleResponse)
async def get_article(
    identifier: str,
    user: AuthUser | None = Depends(get_optional_user),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by slug or ID."""
    try:
        article = await service.get_article(identifier, include_unpublished=user is not None)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    _: AuthUser = Depends(require_admin),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article; the slug is derived from the title."""
    try:
        article = await service.create_article(data)
    except DuplicateEntityError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=_CONFLICT_DETAIL)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{identifier}", response_model=ArticleResponse)
async def update_article(
    identifier: str,
    data: ArticleUpdate,
    _: AuthUser = Depends(require_admin),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update an existing article."""
    try:
        article = await service.update_article(identifier, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=_CONFLICT_DETAIL)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{identifier}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    identifier: str,
    _: AuthUser = Depends(require_admin),
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by slug or ID."""
    try:
        await service.delete_article(identifier)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
