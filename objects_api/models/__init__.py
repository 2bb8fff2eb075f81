"""SQLAlchemy ORM models.

Models represent database tables owned by the indexer:
- sui_objects: object versions with their Move type
"""

from objects_api.models.base import Base
from objects_api.models.sui_object import SuiObject

__all__ = ["Base", "SuiObject"]
