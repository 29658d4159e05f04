"""
Flask Application Factory
"""
import logging
from typing import Optional
from flask import Flask
from .config import Config, ConfigurationError
from .model.database import Database
from .model.article_model import ArticleModel
from .controller.article_controller import ArticleController

__all__ = ['create_app', 'Config', 'ConfigurationError']

logger = logging.getLogger(__name__)


def create_app(config: Optional[dict] = None, database: Optional[Database] = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config: Settings overriding the environment-derived ``Config`` values
        database: A Database to use instead of connecting to ``MONGODB_URI``

    Raises:
        ConfigurationError: If the resulting settings are invalid
    """
    settings = Config.as_dict()
    if config:
        settings.update(config)
    settings = Config.validate(settings)

    app = Flask(
        __name__,
        static_folder=settings['STATIC_FOLDER'],
        static_url_path=''
    )
    app.config.update(settings)
    app.json.sort_keys = False

    if database is None:
        database = Database()
    database.connect(
        connection_string=app.config['MONGODB_URI'],
        database_name=app.config['MONGODB_DB'],
        timeout_ms=app.config['MONGODB_TIMEOUT_MS']
    )

    article_model = ArticleModel(database)
    app.extensions['wiki_api'] = article_model

    _register_routes(app, ArticleController(
        article_model,
        strict_status=app.config['WIKI_STRICT_STATUS']
    ))

    logger.info(
        f"Wiki API created (strict status codes: {app.config['WIKI_STRICT_STATUS']})"
    )
    return app


def _register_routes(app: Flask, articles: ArticleController) -> None:
    """Register application routes"""
    # Requests targeting all articles
    app.add_url_rule('/articles', 'list_articles', articles.list_articles, methods=['GET'])
    app.add_url_rule('/articles', 'create_article', articles.create_article, methods=['POST'])
    app.add_url_rule('/articles', 'delete_articles', articles.delete_articles, methods=['DELETE'])

    # Requests targeting a specific article; titles may contain "/"
    app.add_url_rule('/articles/<path:article_title>', 'get_article',
                     articles.get_article, methods=['GET'])
    app.add_url_rule('/articles/<path:article_title>', 'replace_article',
                     articles.replace_article, methods=['PUT'])
    app.add_url_rule('/articles/<path:article_title>', 'update_article',
                     articles.update_article, methods=['PATCH'])
    app.add_url_rule('/articles/<path:article_title>', 'delete_article',
                     articles.delete_article, methods=['DELETE'])
