from .collection import Collection
from .factory import CollectionCreated, Factory

__all__ = ("Collection", "CollectionCreated", "Factory")
