from .article_service import ArticleService
from .slug_resolver import SlugResolver
from .session_service import SessionOptions, SessionService, verify_credentials
from .session_reaper import SessionReaper

__all__ = [
    "ArticleService",
    "SlugResolver",
    "SessionOptions",
    "SessionService",
    "verify_credentials",
    "SessionReaper",
]
