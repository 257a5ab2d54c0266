"""
Natural language query interpreter.

Turns phrases like "all single word palindromic strings" into the same
filter dict accepted by ``GET /strings``. There is no grammar here: the query
is lower-cased and checked against an ordered catalog of regex rules. Every
rule that matches writes its keys into the result, in catalog order, so when
two rules write the same key the later rule wins. For example
"longer than 3 and between 5 and 10 characters" yields
``{"min_length": 5, "max_length": 10}``.

Examples:
- "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
- "strings longer than 10 characters" -> {min_length: 11}
- "strings containing the letter z" -> {contains_character: "z"}
- "palindromic strings that contain the first vowel" -> {is_palindrome: true, contains_character: "a"}
"""

import logging
import re
from typing import Any, Callable, Dict, List, Tuple

from string_analyzer.errors import UnparsedQueryError

logger = logging.getLogger(__name__)

Effect = Callable[[re.Match], Dict[str, Any]]

SUPPORTED_PHRASES = [
    "palindromic / palindrome",
    "non-palindromic / not palindrome",
    "single word / one word / two words / N words",
    "longer than N characters",
    "shorter than N characters",
    "exactly N characters",
    "between X and Y characters",
    "containing the letter X",
    "containing the first vowel",
]

_CONTAINS = r"\bcontain(?:s|ing)?\s+"

RULES: List[Tuple[re.Pattern, Effect]] = [
    (re.compile(r"\bpalindrom(?:e|es|ic)\b"),
     lambda m: {"is_palindrome": True}),
    (re.compile(r"\bnon[- ]?palindrom(?:e|es|ic)\b|\bnot\s+(?:a\s+)?palindrom(?:e|es|ic)\b"),
     lambda m: {"is_palindrome": False}),

    (re.compile(r"\b(?:single|one)[- ]words?\b"),
     lambda m: {"word_count": 1}),
    (re.compile(r"\btwo[- ]words?\b"),
     lambda m: {"word_count": 2}),
    (re.compile(r"\bthree[- ]words?\b"),
     lambda m: {"word_count": 3}),
    (re.compile(r"(?<!than )(?<!and )\b(\d+)[- ]words?\b|\bword count of (\d+)\b"),
     lambda m: {"word_count": int(m.group(1) or m.group(2))}),

    (re.compile(r"\blonger than\s+(\d+)\b"),
     lambda m: {"min_length": int(m.group(1)) + 1}),
    (re.compile(r"\bshorter than\s+(\d+)\b"),
     lambda m: {"max_length": int(m.group(1)) - 1}),
    (re.compile(r"\bexactly\s+(\d+)\b(?!\s*words?\b)"),
     lambda m: {"min_length": int(m.group(1)), "max_length": int(m.group(1))}),
    (re.compile(r"\bbetween\s+(\d+)\s+and\s+(\d+)\b"),
     lambda m: {"min_length": int(m.group(1)), "max_length": int(m.group(2))}),

    (re.compile(_CONTAINS + r"([a-z0-9])\b"),
     lambda m: {"contains_character": m.group(1)}),
    (re.compile(_CONTAINS + r"(?:the\s+|a\s+)?(?:letter|character)\s+([a-z0-9])\b"),
     lambda m: {"contains_character": m.group(1)}),
    # Heuristic: "the first vowel" always means 'a'
    (re.compile(_CONTAINS + r"(?:the\s+)?first vowel\b"),
     lambda m: {"contains_character": "a"}),
]


def parse_natural_language_query(query: str, rules: List[Tuple[re.Pattern, Effect]] = RULES) -> Dict[str, Any]:
    """
    Parse natural language query into filter parameters.

    Raises UnparsedQueryError when no rule matches. Conflicting bounds
    (min_length > max_length) are returned as-is for the caller to reject.
    """
    text = query.lower()
    filters: Dict[str, Any] = {}
    matched = False

    for pattern, effect in rules:
        match = pattern.search(text)
        if match:
            matched = True
            filters.update(effect(match))

    if not matched:
        raise UnparsedQueryError(
            "Unable to parse natural language query",
            {"hint": "Try phrases such as: " + "; ".join(SUPPORTED_PHRASES)},
        )

    logger.info(f"Interpreted query {query!r} as {filters}")
    return filters
