"""In-memory user store."""

from __future__ import annotations

import asyncio
import copy
from typing import Any

from users.codec import USER_KEY
from users.exceptions import ConditionFailedError, StoreError
from users.interfaces.user_store import WriteCondition


class MemoryUserStore:
    def __init__(self, key_name: str = USER_KEY) -> None:
        self._lock = asyncio.Lock()
        self._key_name = key_name
        self._tables: dict[str, dict[Any, dict[str, Any]]] = {}

    def _key_value(self, key: dict[str, Any]) -> Any:
        attribute = key.get(self._key_name)
        if not isinstance(attribute, dict) or not attribute:
            raise StoreError(f"Key must contain attribute '{self._key_name}'")
        if "" in attribute.values():
            raise StoreError(f"Key attribute '{self._key_name}' must not be empty")
        return tuple(sorted(attribute.items()))

    async def get_item(self, table_name: str, key: dict[str, Any]) -> dict[str, Any]:
        key_value = self._key_value(key)
        async with self._lock:
            item = self._tables.get(table_name, {}).get(key_value)
            return copy.deepcopy(item) if item else {}

    async def scan(self, table_name: str) -> list[dict[str, Any]]:
        async with self._lock:
            return [copy.deepcopy(item) for item in self._tables.get(table_name, {}).values()]

    async def put_item(
        self,
        table_name: str,
        item: dict[str, Any],
        condition: WriteCondition | None = None,
    ) -> None:
        key_value = self._key_value(item)
        async with self._lock:
            table = self._tables.setdefault(table_name, {})
            if condition == WriteCondition.ABSENT and key_value in table:
                raise ConditionFailedError("Item already exists")
            if condition == WriteCondition.PRESENT and key_value not in table:
                raise ConditionFailedError("Item does not exist")
            table[key_value] = copy.deepcopy(item)

    async def delete_item(self, table_name: str, key: dict[str, Any]) -> None:
        key_value = self._key_value(key)
        async with self._lock:
            self._tables.get(table_name, {}).pop(key_value, None)
