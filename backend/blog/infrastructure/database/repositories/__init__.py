from .article_repository import SQLAlchemyArticleRepository
from .admin_session_repository import SQLAlchemyAdminSessionRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyAdminSessionRepository",
]
