from .article import ArticleModel
from .admin_session import AdminSessionModel

__all__ = [
    "ArticleModel",
    "AdminSessionModel",
]
