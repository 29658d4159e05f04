"""
Article Controller - Handles the /articles routes
"""
import logging
from flask import jsonify, request
from pymongo.errors import PyMongoError
from ..model.article_model import ArticleModel

logger = logging.getLogger(__name__)

ADDED = "Successfully added a new article."
ALL_DELETED = "All articles sucessfully deleted."
NOT_FOUND = "No article matching that title was found."
REPLACED = "Successfully updated article"
UPDATED = "Successfully updated article."
DELETED = "Successfully deleted article."


def _text(message: str, status: int = 200):
    return message, status, {'Content-Type': 'text/plain; charset=utf-8'}


class ArticleController:
    """
    Controller for article operations.

    Every handler performs exactly one store call. Driver failures are
    answered with the raw error payload; with ``strict_status`` enabled they
    use 500 and a missing article uses 404, otherwise everything is 200.
    """

    def __init__(self, article_model: ArticleModel, strict_status: bool = False):
        self.article_model = article_model
        self.strict_status = strict_status

    def _error(self, action: str, e: PyMongoError):
        logger.error(f"Database error while {action}: {e}")
        response = jsonify({
            "name": type(e).__name__,
            "message": str(e)
        })
        return response, 500 if self.strict_status else 200

    # Collection routes

    def list_articles(self):
        """GET /articles"""
        try:
            return jsonify(self.article_model.find_all())
        except PyMongoError as e:
            return self._error("listing articles", e)

    def create_article(self):
        """POST /articles"""
        try:
            self.article_model.insert(request.form)
            return _text(ADDED)
        except PyMongoError as e:
            return self._error("inserting article", e)

    def delete_articles(self):
        """DELETE /articles"""
        try:
            self.article_model.delete_all()
            return _text(ALL_DELETED)
        except PyMongoError as e:
            return self._error("deleting articles", e)

    # Single article routes

    def get_article(self, article_title: str):
        """GET /articles/<article_title>"""
        try:
            article = self.article_model.find_one(article_title)
        except PyMongoError as e:
            return self._error("retrieving article", e)

        if article:
            return jsonify(article)
        return _text(NOT_FOUND, 404 if self.strict_status else 200)

    def replace_article(self, article_title: str):
        """PUT /articles/<article_title>"""
        try:
            self.article_model.replace(article_title, request.form)
            return _text(REPLACED)
        except PyMongoError as e:
            return self._error("replacing article", e)

    def update_article(self, article_title: str):
        """PATCH /articles/<article_title>"""
        try:
            self.article_model.merge_update(article_title, request.form)
            return _text(UPDATED)
        except PyMongoError as e:
            return self._error("updating article", e)

    def delete_article(self, article_title: str):
        """DELETE /articles/<article_title>"""
        try:
            self.article_model.delete_one(article_title)
            return _text(DELETED)
        except PyMongoError as e:
            return self._error("deleting article", e)
