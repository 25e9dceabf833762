import re
import logging
from typing import Dict, Optional

from string_analyzer.filters import FilterSet

logger = logging.getLogger(__name__)

NUMBER_WORDS = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
}
NUMBER = r"\b(\d+|" + "|".join(NUMBER_WORDS) + r")\b"


def _to_int(token: str) -> int:
    if token.isdigit():
        return int(token)
    return NUMBER_WORDS[token]


def _search_number(pattern: str, query: str) -> Optional[int]:
    match = re.search(pattern, query)
    if match:
        return _to_int(match.group(1))
    return None


def parse_natural_language_query(query: str) -> Dict:
    """
    Parse natural language query into filter parameters
    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}

    Phrases that are not recognised are ignored; an empty dict is a valid result.
    """
    query = query.lower()
    filters = {}

    # Palindrome, negated forms first since they contain the positive keyword
    if re.search(r"\b(not|non)[\s-]?palindrom", query):
        filters["is_palindrome"] = False
    elif "palindrom" in query:
        filters["is_palindrome"] = True

    # Check for single word / one word
    if re.search(r"\b(single|one) word\b", query):
        filters["word_count"] = 1
    else:
        word_count = _search_number(NUMBER + r" words?\b", query)
        if word_count is not None:
            filters["word_count"] = word_count

    # Length bounds; "longer/shorter than" are exclusive, "at least/at most" inclusive
    longer = _search_number(r"longer than " + NUMBER, query)
    if longer is not None:
        filters["min_length"] = longer + 1

    at_least = _search_number(r"at least " + NUMBER + r" char", query)
    if at_least is not None:
        filters["min_length"] = at_least

    shorter = _search_number(r"shorter than " + NUMBER, query)
    if shorter is not None:
        filters["max_length"] = shorter - 1

    at_most = _search_number(r"at most " + NUMBER + r" char", query)
    if at_most is not None:
        filters["max_length"] = at_most

    # Check for "containing the letter X" / "contains letter X" / "containing X"
    letter_match = re.search(r"contain(?:s|ing)?(?: the)? (?:letter|character) ['\"]?([^\s'\"])", query)
    if not letter_match:
        # Bare form skips the articles "a" and "an"
        letter_match = re.search(r"\bcontaining (?!an?\b)['\"]?([a-z])(?:[^a-z]|$)", query)
    if letter_match:
        filters["contains_character"] = letter_match.group(1)

    # Check for "first vowel" -> 'a'
    if "first vowel" in query:
        filters["contains_character"] = "a"

    if not filters:
        logger.info(f"No filters recognised in query: {query!r}")

    return filters


def interpret_query(query: str) -> FilterSet:
    """Translate free text into the same predicate set used by GET /strings"""
    return FilterSet(**parse_natural_language_query(query))
