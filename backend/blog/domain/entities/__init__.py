from .article import Article, ArticlePage
from .admin_session import AdminSession, AuthUser, SessionInfo

__all__ = [
    "Article",
    "ArticlePage",
    "AdminSession",
    "AuthUser",
    "SessionInfo",
]
