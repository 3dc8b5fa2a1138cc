"""Languages the curriculum ships in and the certifications audited for each."""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

ENGLISH = "english"

SUPPORTED_LANGUAGES: Tuple[str, ...] = (
    "arabic",
    "chinese",
    "english",
    "espanol",
    "portuguese",
    "russian",
)

# Superblock names (without the order prefix) whose translations passed review.
AUDITED_CERTS: Dict[str, FrozenSet[str]] = {
    "espanol": frozenset(
        {
            "responsive-web-design",
            "javascript-algorithms-and-data-structures",
        }
    ),
    "chinese": frozenset(
        {
            "responsive-web-design",
            "javascript-algorithms-and-data-structures",
            "front-end-libraries",
            "data-visualization",
            "apis-and-microservices",
            "quality-assurance",
            "scientific-computing-with-python",
            "data-analysis-with-python",
            "information-security",
            "machine-learning-with-python",
            "coding-interview-prep",
        }
    ),
}


def is_supported_language(lang: str) -> bool:
    return lang in SUPPORTED_LANGUAGES


def is_audited_cert(lang: str, super_block: str) -> bool:
    """English is always audited; other languages only for listed superblocks."""
    if not lang or not super_block:
        return False
    if lang == ENGLISH:
        return True
    return super_block in AUDITED_CERTS.get(lang, frozenset())


__all__ = [
    "AUDITED_CERTS",
    "ENGLISH",
    "SUPPORTED_LANGUAGES",
    "is_audited_cert",
    "is_supported_language",
]
