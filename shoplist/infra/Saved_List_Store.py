"""Key-value store for saved shopping lists.

The store is owned by whoever needs lists to outlive a single request (the API
process keeps one); the shopping list logic itself holds no state.
"""
from __future__ import annotations
from typing import Dict, List, Optional, Protocol

from shoplist.domain.ShoppingList import SavedShoppingList


class SavedListStore(Protocol):
    def get(self, list_id: str) -> Optional[SavedShoppingList]: ...
    def put(self, saved: SavedShoppingList) -> None: ...
    def delete(self, list_id: str) -> bool: ...
    def values(self) -> List[SavedShoppingList]: ...
    def clear(self) -> None: ...
    def __len__(self) -> int: ...


class InMemorySavedListStore:
    def __init__(self):
        self._lists: Dict[str, SavedShoppingList] = {}

    def get(self, list_id: str) -> Optional[SavedShoppingList]:
        return self._lists.get(list_id)

    def put(self, saved: SavedShoppingList) -> None:
        self._lists[saved.list_id] = saved

    def delete(self, list_id: str) -> bool:
        return self._lists.pop(list_id, None) is not None

    def values(self) -> List[SavedShoppingList]:
        return list(self._lists.values())

    def clear(self) -> None:
        self._lists.clear()

    def __len__(self) -> int:
        return len(self._lists)


__all__ = ['SavedListStore', 'InMemorySavedListStore']
