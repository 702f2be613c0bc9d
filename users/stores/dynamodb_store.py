"""DynamoDB user store using boto3."""

from __future__ import annotations

import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from users.codec import USER_KEY
from users.exceptions import ConditionFailedError, StoreError
from users.interfaces.user_store import WriteCondition

logger = logging.getLogger(__name__)

_CONDITION_EXPRESSIONS = {
    WriteCondition.ABSENT: "attribute_not_exists(#k)",
    WriteCondition.PRESENT: "attribute_exists(#k)",
}


class DynamoDBUserStore:
    """User store backed by a DynamoDB table."""

    def __init__(
        self,
        client: Optional[Any] = None,
        region_name: str = "us-east-1",
        endpoint_url: Optional[str] = None,
        key_name: str = USER_KEY,
    ) -> None:
        """
        Initialize the store.

        Args:
            client: Preconfigured boto3 DynamoDB client; created when omitted
            region_name: AWS region of the table
            endpoint_url: Optional endpoint override (DynamoDB Local)
            key_name: Partition key attribute of the table
        """
        self._client = client or boto3.client(
            service_name="dynamodb",
            region_name=region_name,
            endpoint_url=endpoint_url,
        )
        self._key_name = key_name

    async def get_item(self, table_name: str, key: dict[str, Any]) -> dict[str, Any]:
        try:
            response = self._client.get_item(TableName=table_name, Key=key)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"DynamoDB get_item failed on table {table_name}: {e}")
            raise StoreError(str(e)) from e
        return response.get("Item", {})

    async def scan(self, table_name: str) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        try:
            paginator = self._client.get_paginator("scan")
            for page in paginator.paginate(TableName=table_name):
                items.extend(page.get("Items", []))
        except (ClientError, BotoCoreError) as e:
            logger.error(f"DynamoDB scan failed on table {table_name}: {e}")
            raise StoreError(str(e)) from e
        return items

    async def put_item(
        self,
        table_name: str,
        item: dict[str, Any],
        condition: WriteCondition | None = None,
    ) -> None:
        params: dict[str, Any] = {"TableName": table_name, "Item": item}
        if condition is not None:
            params["ConditionExpression"] = _CONDITION_EXPRESSIONS[condition]
            params["ExpressionAttributeNames"] = {"#k": self._key_name}

        try:
            self._client.put_item(**params)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            if error_code == "ConditionalCheckFailedException":
                logger.info(f"Conditional put ({condition}) rejected on table {table_name}")
                raise ConditionFailedError(str(e)) from e
            logger.error(f"DynamoDB put_item failed on table {table_name}: {e}")
            raise StoreError(str(e)) from e
        except BotoCoreError as e:
            logger.error(f"DynamoDB put_item failed on table {table_name}: {e}")
            raise StoreError(str(e)) from e

    async def delete_item(self, table_name: str, key: dict[str, Any]) -> None:
        try:
            self._client.delete_item(TableName=table_name, Key=key)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"DynamoDB delete_item failed on table {table_name}: {e}")
            raise StoreError(str(e)) from e
