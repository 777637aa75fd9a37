"""Unit-test the default equality check used by the map expectation"""


from unittest import TestCase

from unordered_expectations.equality import check_equal


class CheckEqualTestCase(TestCase):
    """Unit-test the generic equality check"""

    def test_equal_values(self):
        """Equal values (including nested ones) pass"""
        self.assertTrue(check_equal({"a": [1, 2]}, {"a": [1, 2]}).passed)
        self.assertTrue(check_equal(3, 3).passed)

    def test_mapping_components(self):
        """Each mismatching component of a mapping gets its own line"""

        outcome = check_equal({"a": 1, "b": "x"}, {"a": 1, "b": 2})
        self.assertFalse(outcome.passed)
        self.assertEqual("`actual` not equal to `expected`.\n"
                         "Component \"b\": 'x' != 2",
                         outcome.message)

    def test_mapping_missing_components(self):
        """Keys on only one side are called out as absent"""

        outcome = check_equal({"a": 1, "z": 0}, {"a": 1, "b": 2})
        self.assertEqual("`actual` not equal to `expected`.\n"
                         "Component \"b\": absent from actual\n"
                         "Component \"z\": absent from expected",
                         outcome.message)

    def test_scalar_mismatch_with_labels(self):
        """Non-mappings are described as a whole, using the given labels"""

        outcome = check_equal(1, 2, actual_label="x", expected_label="y")
        self.assertEqual("x not equal to y.\n1 != 2", outcome.message)
