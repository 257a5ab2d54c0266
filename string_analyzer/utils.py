import hashlib
from collections import Counter
from typing import Dict


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string (lone surrogates hashed as their raw code units)"""
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, spaces and punctuation kept)"""
    folded = text.lower()
    return folded == folded[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze_string(value: str) -> Dict:
    """
    Analyze a string and return all computed properties.

    The value is analyzed exactly as given: no trimming, no normalization.
    """
    return {
        "length": len(value),
        "is_palindrome": is_palindrome(value),
        "unique_characters": count_unique_characters(value),
        "word_count": count_words(value),
        "sha256_hash": compute_sha256(value),
        "character_frequency_map": get_character_frequency(value),
    }
