import unittest


from users.codec import (
    RecordCodecError,
    decode_user_body,
    marshal_user,
    unmarshal_user,
    unmarshal_users,
    user_key,
)
from users.schemas import User


class TestDecodeUserBody(unittest.TestCase):
    def test_decodes_wire_field_names(self):
        user = decode_user_body('{"email":"a@b.co","firstName":"A","lastName":"B"}')

        self.assertEqual(user.email, "a@b.co")
        self.assertEqual(user.first_name, "A")
        self.assertEqual(user.last_name, "B")

    def test_missing_and_null_fields_default_to_empty(self):
        user = decode_user_body(b'{"email":"a@b.co","lastName":null,"extra":1}')

        self.assertEqual(user.first_name, "")
        self.assertEqual(user.last_name, "")

    def test_rejects_undecodable_bodies(self):
        for body in (None, "", "not json", "[]", '"a@b.co"', '{"email": 5}', "null"):
            with self.subTest(body=body):
                with self.assertRaises(RecordCodecError):
                    decode_user_body(body)


class TestStoredRepresentation(unittest.TestCase):
    def test_marshal_produces_string_attributes(self):
        item = marshal_user(User(email="a@b.co", first_name="A", last_name="B"))

        self.assertEqual(
            item,
            {"email": {"S": "a@b.co"}, "firstName": {"S": "A"}, "lastName": {"S": "B"}},
        )

    def test_round_trip_preserves_all_fields(self):
        original = User(email="a@b.co", first_name="Ada", last_name="")

        self.assertEqual(unmarshal_user(marshal_user(original)), original)

    def test_empty_item_decodes_to_absent_user(self):
        self.assertEqual(unmarshal_user({}).email, "")
        self.assertEqual(unmarshal_user(None).email, "")

    def test_null_attribute_reads_back_as_empty(self):
        user = unmarshal_user({"email": {"S": "a@b.co"}, "firstName": {"NULL": True}})

        self.assertEqual(user.first_name, "")

    def test_rejects_malformed_items(self):
        for item in (
            {"email": {"N": "5"}},
            {"email": "a@b.co"},
            {"email": {"BOGUS": "x"}},
        ):
            with self.subTest(item=item):
                with self.assertRaises(RecordCodecError):
                    unmarshal_user(item)

    def test_unmarshal_users_keeps_order(self):
        users = unmarshal_users([
            {"email": {"S": "a@b.co"}},
            {"email": {"S": "c@d.co"}},
        ])

        self.assertEqual([user.email for user in users], ["a@b.co", "c@d.co"])

    def test_user_key(self):
        self.assertEqual(user_key("a@b.co"), {"email": {"S": "a@b.co"}})


if __name__ == "__main__":
    unittest.main()
