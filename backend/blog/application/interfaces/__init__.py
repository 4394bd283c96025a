from .article_repository import ArticleRepository
from .admin_session_repository import AdminSessionRepository

__all__ = [
    "ArticleRepository",
    "AdminSessionRepository",
]
