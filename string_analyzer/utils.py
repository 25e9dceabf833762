import hashlib
import re
from collections import Counter
from typing import Dict

SPECIAL_CHARACTER_PATTERN = re.compile(r"[^A-Za-z0-9\s]")
NON_LOWERCASE_LETTER_PATTERN = re.compile(r"[^a-z]")


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, spaces and punctuation included)"""
    lowered = text.lower()
    return lowered == lowered[::-1]


def count_special_characters(text: str) -> int:
    """Count characters that are neither alphanumeric nor whitespace"""
    return len(SPECIAL_CHARACTER_PATTERN.findall(text))


def count_words(text: str) -> int:
    """Count segments separated by a single space; empty segments count too"""
    return len(text.split(" "))


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of lowercase letters, everything else stripped"""
    letters = NON_LOWERCASE_LETTER_PATTERN.sub("", text.lower())
    return dict(Counter(letters))


def analyze_string(value: str) -> Dict:
    """Analyze a string and return all computed properties"""
    return {
        "length": len(value),
        "is_palindrome": is_palindrome(value),
        "unique_characters": count_special_characters(value),
        "word_count": count_words(value),
        "sha256_hash": compute_sha256(value),
        "character_frequency_map": get_character_frequency(value),
    }
