"""Unit-test named collections and the validation of their names"""


from unittest import TestCase

from unordered_expectations.exception import InvalidArgument
from unordered_expectations.names import (NamedVector, has_names, is_vector,
                                          names_of, validate_names,
                                          values_of)


class NamedVectorTestCase(TestCase):
    """Unit-test the NamedVector container"""

    def test_positional_access(self):
        """Indexing and iteration are by position, like a list"""

        vector = NamedVector([10, 20], names=["a", "b"])
        self.assertEqual(2, len(vector))
        self.assertEqual(20, vector[1])
        self.assertEqual([10, 20], list(vector))

    def test_mismatched_lengths(self):
        """Every value needs exactly one name"""
        with self.assertRaises(ValueError):
            NamedVector([1, 2, 3], names=["a", "b"])

    def test_unnamed_vector(self):
        """An unnamed vector projects one empty name per value"""

        vector = NamedVector([1, 2])
        self.assertIsNone(vector.names)
        self.assertEqual(["", ""], names_of(vector))
        self.assertEqual(["a", "b"],
                         names_of(NamedVector([1, 2], names=["a", "b"])))

    def test_equality(self):
        """Equality takes both values and names (in order) into account"""

        self.assertEqual(NamedVector([1], names=["a"]),
                         NamedVector([1], names=["a"]))
        self.assertNotEqual(NamedVector([1], names=["a"]),
                            NamedVector([1], names=["b"]))
        self.assertNotEqual(NamedVector([1]), [1])


class VectorPredicatesTestCase(TestCase):
    """Unit-test the recognition of vectors and their names"""

    def test_is_vector(self):
        """Collections are vectors; strings, scalars and None are not"""

        for value in ([], (1, 2), {"a": 1}, {1, 2}, NamedVector([])):
            self.assertTrue(is_vector(value), value)
        for value in (None, "abc", b"abc", 1, 2.5):
            self.assertFalse(is_vector(value), value)

    def test_has_names(self):
        """Only non-empty mappings and named NamedVectors carry names"""

        self.assertTrue(has_names({"a": 1}))
        self.assertTrue(has_names(NamedVector([1], names=["a"])))
        self.assertFalse(has_names({}))
        self.assertFalse(has_names(NamedVector([1])))
        self.assertFalse(has_names([1, 2]))

    def test_names_and_values(self):
        """Names and values are projected out in order"""

        self.assertEqual(["b", "a"], names_of({"b": 2, "a": 1}))
        self.assertEqual([2, 1], values_of({"b": 2, "a": 1}))
        self.assertEqual(["", ""], names_of([1, 2]))
        self.assertEqual([1, 2], values_of((1, 2)))


class ValidateNamesTestCase(TestCase):
    """Unit-test the rules that names must satisfy"""

    def test_valid_names(self):
        """Unique, non-empty names pass silently"""
        validate_names(["a", "b", "c"], "object")
        validate_names([], "object")

    def test_duplicate_names(self):
        """Each duplicated name is reported once, along with the label"""

        with self.assertRaises(InvalidArgument) as context:
            validate_names(["a", "b", "a", "b", "a"], "expected")
        self.assertEqual('Duplicate names in `expected`: "a", "b"',
                         context.exception.message)

    def test_empty_name(self):
        """Every element must have a name"""

        with self.assertRaises(InvalidArgument) as context:
            validate_names(["a", ""], "object")
        self.assertEqual("All elements in `object` must be named",
                         context.exception.message)

    def test_duplicates_are_checked_first(self):
        """A collection with both problems is reported for its duplicates"""

        with self.assertRaises(InvalidArgument) as context:
            validate_names(["a", "", "a"], "object")
        self.assertIn("Duplicate names", context.exception.message)

    def test_unnamed_elements_are_not_duplicates(self):
        """Several unnamed elements are reported as unnamed"""

        with self.assertRaises(InvalidArgument) as context:
            validate_names(["", ""], "object")
        self.assertEqual("All elements in `object` must be named",
                         context.exception.message)
