import unittest

from y2l import log
from y2l.errors import ExtractionError, InvalidUrlError, ServiceError, UnauthorizedError


class ErrorsTest(unittest.TestCase):

    def test_statuses(self):
        self.assertEqual(InvalidUrlError("Invalid YouTube URL").http_status, 400)
        self.assertEqual(UnauthorizedError().http_status, 401)
        self.assertEqual(ExtractionError("failed").http_status, 500)
        self.assertEqual(ServiceError("failed").http_status, 500)

    def test_api_dict_hides_cause(self):
        try:
            try:
                raise ValueError("stderr details")
            except ValueError as e:
                raise ServiceError("Failed to fetch video info") from e
        except ServiceError as error:
            self.assertEqual(error.to_api_dict(), {"error": "Failed to fetch video info"})
            self.assertIn("stderr details", str(error))


class LogTest(unittest.TestCase):

    def test_single_message(self):
        self.assertEqual(log.i("hello"), "hello")

    def test_message_tree(self):
        self.assertEqual(log.w("first", "second"), "first\n └─ second")

    def test_exception_is_named(self):
        message = log.e("failed", ValueError("bad"))
        self.assertIn("ValueError: bad", message)
