from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticleSummary,
    ArticleListResponse,
    PaginationMeta,
    ListFilters,
)
from .auth import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    AuthUserResponse,
    SessionStatusResponse,
)

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleSummary",
    "ArticleListResponse",
    "PaginationMeta",
    "ListFilters",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "AuthUserResponse",
    "SessionStatusResponse",
]
