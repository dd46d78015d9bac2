import unittest

from blog.services.errors import InvalidArgument
from blog.services.validation import (
    MAX_IDENTIFIER,
    SORT_DIRECTIONS,
    SORT_FIELDS,
    parse_id_list,
    validate_enum,
    validate_identifier,
    validate_non_empty_string,
    validate_non_empty_strings,
    validate_positive_integers,
    validate_tags,
)


class TestValidatePositiveIntegers(unittest.TestCase):
    def test_accepts_ints_and_digit_strings(self):
        self.assertEqual(validate_positive_integers([1, "2", " 3 "]), [1, 2, 3])

    def test_accepts_zero(self):
        self.assertEqual(validate_positive_integers([0]), [0])

    def test_rejects_empty_sequence(self):
        with self.assertRaises(InvalidArgument):
            validate_positive_integers([])

    def test_rejects_negative_and_non_numeric(self):
        for bad in ([-1], ["abc"], ["1.5"], [1.0], [None], [True], [""]):
            with self.subTest(values=bad):
                with self.assertRaises(InvalidArgument):
                    validate_positive_integers(bad)

    def test_never_raises_other_errors_for_odd_types(self):
        for bad in (None, 5, "1,2", {"a": 1}, object()):
            with self.subTest(values=bad):
                with self.assertRaises(InvalidArgument):
                    validate_positive_integers(bad)

    def test_error_names_the_field(self):
        with self.assertRaises(InvalidArgument) as ctx:
            validate_positive_integers("x", field="authorIds")
        self.assertEqual(str(ctx.exception), "authorIds must be an array")


class TestParseIdList(unittest.TestCase):
    def test_parses_comma_separated_ids(self):
        self.assertEqual(parse_id_list("1,2,5"), [1, 2, 5])

    def test_missing_value_is_rejected(self):
        with self.assertRaises(InvalidArgument) as ctx:
            parse_id_list(None, field="authorIds")
        self.assertEqual(str(ctx.exception), "Must provide authorIds")

    def test_blank_element_is_rejected(self):
        with self.assertRaises(InvalidArgument):
            parse_id_list("1,,2")


class TestStringValidators(unittest.TestCase):
    def test_non_empty_string_is_stripped(self):
        self.assertEqual(validate_non_empty_string("  hello "), "hello")

    def test_blank_or_non_string_rejected(self):
        for bad in ("", "   ", None, 3, ["a"]):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidArgument):
                    validate_non_empty_string(bad)

    def test_non_empty_strings(self):
        self.assertEqual(validate_non_empty_strings(["a", "b"]), ["a", "b"])
        for bad in ([], ["a", ""], ["a", 1], "ab", None):
            with self.subTest(values=bad):
                with self.assertRaises(InvalidArgument):
                    validate_non_empty_strings(bad)

    def test_tags_cannot_contain_the_delimiter(self):
        with self.assertRaises(InvalidArgument):
            validate_tags(["a,b"])


class TestEnumAndIdentifier(unittest.TestCase):
    def test_enum(self):
        self.assertEqual(validate_enum("likes", SORT_FIELDS), "likes")
        self.assertEqual(validate_enum("desc", SORT_DIRECTIONS), "desc")
        for bad in ("name", "", None, 1):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidArgument):
                    validate_enum(bad, SORT_FIELDS)

    def test_enum_message_lists_allowed_values(self):
        with self.assertRaises(InvalidArgument) as ctx:
            validate_enum("name", SORT_FIELDS, field="sortBy")
        self.assertEqual(
            str(ctx.exception), "sortBy must be one of id, reads, likes, popularity"
        )

    def test_identifier(self):
        self.assertEqual(validate_identifier("12"), 12)
        with self.assertRaises(InvalidArgument):
            validate_identifier("-3")

    def test_identifier_must_fit_a_bigint_column(self):
        self.assertEqual(validate_identifier(MAX_IDENTIFIER), MAX_IDENTIFIER)
        self.assertEqual(validate_identifier(str(MAX_IDENTIFIER)), MAX_IDENTIFIER)
        for bad in (MAX_IDENTIFIER + 1, str(MAX_IDENTIFIER + 1), "9" * 5000):
            with self.subTest(value=str(bad)[:30]):
                with self.assertRaises(InvalidArgument):
                    validate_identifier(bad)

    def test_huge_id_in_list_is_rejected(self):
        with self.assertRaises(InvalidArgument):
            parse_id_list("1,99999999999999999999999")


if __name__ == "__main__":
    unittest.main()
