"""
Article Model - Persistence façade over the articles collection
"""
import logging
from typing import List, Dict, Any, Optional, Mapping
from .database import Database

logger = logging.getLogger(__name__)

# Fields accepted from clients; anything else is dropped before a write
ARTICLE_FIELDS = ('title', 'content')

# Records are returned without the MongoDB identifier
PROJECTION = {'_id': 0}


def pick_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only the article fields present in ``data``, in schema order."""
    return {field: data[field] for field in ARTICLE_FIELDS if field in data}


class ArticleModel:
    """
    Article data model keyed by title.

    Single-article operations act on the first document whose title matches
    exactly; titles are not unique. Driver errors (``PyMongoError``) are
    logged and re-raised for the caller to surface.
    """

    collection_name = "articles"

    def __init__(self, db: Database):
        self.db = db

    @property
    def collection(self):
        return self.db.get_collection(self.collection_name)

    def find_all(self) -> List[Dict[str, Any]]:
        """Retrieve every article in natural order"""
        return list(self.collection.find({}, PROJECTION))

    def find_one(self, title: str) -> Optional[Dict[str, Any]]:
        """Retrieve the first article with this title, or None"""
        return self.collection.find_one({'title': title}, PROJECTION)

    def insert(self, data: Mapping[str, Any]) -> None:
        """Insert a new article built from the supplied fields"""
        article = pick_fields(data)
        self.collection.insert_one(article)
        logger.info(f"Inserted article: {article.get('title', 'N/A')}")

    def replace(self, title: str, data: Mapping[str, Any]) -> None:
        """
        Overwrite the matched article with the supplied fields.

        Fields the caller omits are not retained from the old document.
        A missing target is a no-op.
        """
        result = self.collection.replace_one({'title': title}, pick_fields(data))
        if result.matched_count:
            logger.info(f"Replaced article: {title}")
        else:
            logger.debug(f"No article found to replace: {title}")

    def merge_update(self, title: str, data: Mapping[str, Any]) -> None:
        """
        Set only the supplied fields on the matched article.

        An empty field set and a missing target are both no-ops.
        """
        update_data = pick_fields(data)
        if not update_data:
            logger.debug(f"Nothing to update for article: {title}")
            return

        result = self.collection.update_one({'title': title}, {'$set': update_data})
        if result.matched_count:
            logger.info(f"Updated article: {title}")
        else:
            logger.debug(f"No article found to update: {title}")

    def delete_all(self) -> int:
        """Delete every article, returning how many were removed"""
        result = self.collection.delete_many({})
        logger.info(f"Deleted {result.deleted_count} articles")
        return result.deleted_count

    def delete_one(self, title: str) -> int:
        """Delete the first article with this title, returning 0 or 1"""
        result = self.collection.delete_one({'title': title})
        if result.deleted_count:
            logger.info(f"Deleted article: {title}")
        else:
            logger.debug(f"No article found to delete: {title}")
        return result.deleted_count
