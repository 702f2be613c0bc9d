"""User store interface."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol


class WriteCondition(StrEnum):
    """Guard evaluated by the store atomically with a put."""

    ABSENT = "absent"
    PRESENT = "present"


class UserStore(Protocol):
    async def get_item(self, table_name: str, key: dict[str, Any]) -> dict[str, Any]:
        ...

    async def scan(self, table_name: str) -> list[dict[str, Any]]:
        ...

    async def put_item(
        self,
        table_name: str,
        item: dict[str, Any],
        condition: WriteCondition | None = None,
    ) -> None:
        ...

    async def delete_item(self, table_name: str, key: dict[str, Any]) -> None:
        ...
