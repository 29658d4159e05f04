"""Model package - Database and article persistence"""
from .database import Database
from .article_model import ArticleModel, ARTICLE_FIELDS

__all__ = ['Database', 'ArticleModel', 'ARTICLE_FIELDS']
