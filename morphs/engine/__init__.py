from .engine import MorphsEngine
from .state import CollectionState, EraState, MintRecord

__all__ = ("CollectionState", "EraState", "MintRecord", "MorphsEngine")
