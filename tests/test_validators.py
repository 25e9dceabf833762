from unittest import TestCase

from string_analyzer.exceptions import MissingFieldError, ValidationError, WrongTypeError
from string_analyzer.validators import validate_create_payload


class ValidatorTests(TestCase):
    def test_returns_value(self):
        self.assertEqual(validate_create_payload({"value": "hello"}), "hello")

    def test_missing_or_empty_value(self):
        for payload in [{}, {"value": None}, {"value": ""}, None, ["hello"], "hello"]:
            with self.assertRaises(MissingFieldError, msg=repr(payload)):
                validate_create_payload(payload)

    def test_wrong_type(self):
        for value in [123, 0, False, ["a"], {"a": 1}, 1.5]:
            with self.assertRaises(WrongTypeError, msg=repr(value)) as ctx:
                validate_create_payload({"value": value})
            self.assertEqual(ctx.exception.status_code, 422)

    def test_error_hierarchy(self):
        self.assertTrue(issubclass(MissingFieldError, ValidationError))
        self.assertTrue(issubclass(WrongTypeError, ValidationError))
        self.assertEqual(MissingFieldError("x").status_code, 400)

    def test_lone_surrogate_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_create_payload({"value": "a\ud800b"})
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(validate_create_payload({"value": "café \U0001F600"}), "café \U0001F600")
