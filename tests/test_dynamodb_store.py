import unittest


import boto3
from botocore.stub import Stubber

from users.exceptions import ConditionFailedError, StoreError
from users.interfaces.user_store import WriteCondition
from users.stores.dynamodb_store import DynamoDBUserStore

TABLE = "users-test"
KEY = {"email": {"S": "a@b.co"}}
ITEM = {"email": {"S": "a@b.co"}, "firstName": {"S": "A"}, "lastName": {"S": "B"}}


class TestDynamoDBUserStore(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.client = boto3.client(
            "dynamodb",
            region_name="us-east-1",
            aws_access_key_id="testing",
            aws_secret_access_key="testing",
        )
        self.stubber = Stubber(self.client)
        self.stubber.activate()
        self.store = DynamoDBUserStore(client=self.client)

    def tearDown(self):
        self.stubber.deactivate()

    async def test_get_item_returns_item(self):
        self.stubber.add_response("get_item", {"Item": ITEM}, {"TableName": TABLE, "Key": KEY})

        self.assertEqual(await self.store.get_item(TABLE, KEY), ITEM)
        self.stubber.assert_no_pending_responses()

    async def test_get_item_missing_returns_empty(self):
        self.stubber.add_response("get_item", {}, {"TableName": TABLE, "Key": KEY})

        self.assertEqual(await self.store.get_item(TABLE, KEY), {})

    async def test_get_item_client_error_raises_store_error(self):
        self.stubber.add_client_error("get_item", service_error_code="ResourceNotFoundException")

        with self.assertRaises(StoreError):
            await self.store.get_item(TABLE, KEY)

    async def test_scan_follows_continuation(self):
        other = {"email": {"S": "c@d.co"}}
        self.stubber.add_response(
            "scan",
            {"Items": [ITEM], "LastEvaluatedKey": KEY},
            {"TableName": TABLE},
        )
        self.stubber.add_response(
            "scan",
            {"Items": [other]},
            {"TableName": TABLE, "ExclusiveStartKey": KEY},
        )

        self.assertEqual(await self.store.scan(TABLE), [ITEM, other])
        self.stubber.assert_no_pending_responses()

    async def test_scan_client_error_raises_store_error(self):
        self.stubber.add_client_error("scan", service_error_code="ProvisionedThroughputExceededException")

        with self.assertRaises(StoreError):
            await self.store.scan(TABLE)

    async def test_unconditional_put(self):
        self.stubber.add_response("put_item", {}, {"TableName": TABLE, "Item": ITEM})

        await self.store.put_item(TABLE, ITEM)
        self.stubber.assert_no_pending_responses()

    async def test_put_if_absent_sends_condition(self):
        self.stubber.add_response(
            "put_item",
            {},
            {
                "TableName": TABLE,
                "Item": ITEM,
                "ConditionExpression": "attribute_not_exists(#k)",
                "ExpressionAttributeNames": {"#k": "email"},
            },
        )

        await self.store.put_item(TABLE, ITEM, WriteCondition.ABSENT)
        self.stubber.assert_no_pending_responses()

    async def test_put_if_present_sends_condition(self):
        self.stubber.add_response(
            "put_item",
            {},
            {
                "TableName": TABLE,
                "Item": ITEM,
                "ConditionExpression": "attribute_exists(#k)",
                "ExpressionAttributeNames": {"#k": "email"},
            },
        )

        await self.store.put_item(TABLE, ITEM, WriteCondition.PRESENT)
        self.stubber.assert_no_pending_responses()

    async def test_rejected_condition_raises_condition_failed(self):
        self.stubber.add_client_error("put_item", service_error_code="ConditionalCheckFailedException")

        with self.assertRaises(ConditionFailedError):
            await self.store.put_item(TABLE, ITEM, WriteCondition.ABSENT)

    async def test_other_put_error_raises_store_error(self):
        self.stubber.add_client_error("put_item", service_error_code="ValidationException")

        with self.assertRaises(StoreError) as ctx:
            await self.store.put_item(TABLE, ITEM)
        self.assertNotIsInstance(ctx.exception, ConditionFailedError)

    async def test_delete_passes_table_name(self):
        self.stubber.add_response("delete_item", {}, {"TableName": TABLE, "Key": KEY})

        await self.store.delete_item(TABLE, KEY)
        self.stubber.assert_no_pending_responses()

    async def test_delete_client_error_raises_store_error(self):
        self.stubber.add_client_error("delete_item", service_error_code="ResourceNotFoundException")

        with self.assertRaises(StoreError):
            await self.store.delete_item(TABLE, KEY)


if __name__ == "__main__":
    unittest.main()
