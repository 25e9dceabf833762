from unittest import TestCase

from string_analyzer.nl_parser import interpret_query, parse_natural_language_query


class NaturalLanguageParserTests(TestCase):
    def test_single_word_palindromic(self):
        self.assertEqual(
            parse_natural_language_query("all single word palindromic strings"),
            {"is_palindrome": True, "word_count": 1}
        )

    def test_longer_than(self):
        self.assertEqual(
            parse_natural_language_query("strings longer than 10 characters"),
            {"min_length": 11}
        )

    def test_shorter_than(self):
        self.assertEqual(
            parse_natural_language_query("strings shorter than 5 characters"),
            {"max_length": 4}
        )

    def test_inclusive_bounds(self):
        self.assertEqual(
            parse_natural_language_query("at least 3 characters and at most 8 characters"),
            {"min_length": 3, "max_length": 8}
        )

    def test_containing_letter(self):
        self.assertEqual(
            parse_natural_language_query("strings containing the letter z"),
            {"contains_character": "z"}
        )
        self.assertEqual(
            parse_natural_language_query("Strings that contain the letter Q"),
            {"contains_character": "q"}
        )

    def test_first_vowel(self):
        self.assertEqual(
            parse_natural_language_query("palindromic strings that contain the first vowel"),
            {"is_palindrome": True, "contains_character": "a"}
        )

    def test_negated_palindrome(self):
        self.assertEqual(parse_natural_language_query("non-palindromic strings"), {"is_palindrome": False})
        self.assertEqual(parse_natural_language_query("strings that are not palindromes"), {"is_palindrome": False})

    def test_word_counts(self):
        self.assertEqual(parse_natural_language_query("strings with 3 words"), {"word_count": 3})
        self.assertEqual(parse_natural_language_query("strings with two words"), {"word_count": 2})

    def test_case_insensitive(self):
        self.assertEqual(
            parse_natural_language_query("ALL SINGLE WORD PALINDROMIC STRINGS"),
            {"is_palindrome": True, "word_count": 1}
        )

    def test_unrecognised_text_yields_no_filters(self):
        self.assertEqual(parse_natural_language_query("show me something nice"), {})
        self.assertEqual(interpret_query("gibberish").applied(), {})

    def test_interpret_query_builds_filter_set(self):
        filters = interpret_query("single word strings longer than 2 characters")
        self.assertEqual(filters.word_count, 1)
        self.assertEqual(filters.min_length, 3)
        self.assertIsNone(filters.is_palindrome)

    def test_number_words_need_whole_word_match(self):
        self.assertEqual(parse_natural_language_query("strings longer than seventeen characters"), {})
        self.assertEqual(parse_natural_language_query("strings with none words"), {})
        self.assertEqual(parse_natural_language_query("strings longer than seven characters"), {"min_length": 8})

    def test_containing_skips_articles(self):
        self.assertEqual(parse_natural_language_query("strings containing a digit"), {})
        self.assertEqual(parse_natural_language_query("strings containing an x"), {})
        self.assertEqual(parse_natural_language_query("strings containing q"), {"contains_character": "q"})

    def test_quoted_character(self):
        self.assertEqual(
            parse_natural_language_query("strings containing the character 'x'"),
            {"contains_character": "x"}
        )
        self.assertEqual(
            parse_natural_language_query('strings containing "k"'),
            {"contains_character": "k"}
        )
