"""Slug and display-name helpers for curriculum identifiers."""

from __future__ import annotations

import re
from typing import Any, Dict, FrozenSet

_WHITESPACE = re.compile(r"\s")
_NON_SLUG = re.compile(r"[^a-z0-9\-.]", re.IGNORECASE)
_NON_NAME = re.compile(r"[^a-zA-Z0-9\s]")

_NO_FORMATTING: FrozenSet[str] = frozenset({"and", "for", "of", "the", "up", "with"})

_PREFORMATTED_WORDS: Dict[str, str] = {
    "api": "API",
    "apis": "APIs",
    "css": "CSS",
    "css3": "CSS3",
    "d3": "D3",
    "es6": "ES6",
    "html": "HTML",
    "html5": "HTML5",
    "javascript": "JavaScript",
    "jquery": "jQuery",
    "json": "JSON",
    "mongodb": "MongoDB",
    "nodejs": "Node.js",
    "regex": "RegEx",
}

PREFORMATTED_BLOCK_NAMES: Dict[str, str] = {
    "basic-html-and-html5": "Basic HTML and HTML5",
    "es6": "ES6",
    "regular-expressions": "Regular Expressions",
    "sass": "SASS",
    "managing-packages-with-npm": "Managing Packages with NPM",
    "basic-node-and-express": "Basic Node and Express",
    "mongodb-and-mongoose": "MongoDB and Mongoose",
    "scientific-computing-with-python": "Scientific Computing with Python",
    "data-analysis-with-python": "Data Analysis with Python",
    "machine-learning-with-python": "Machine Learning with Python",
}


def dasherize(name: Any) -> str:
    """Lowercase slug with whitespace turned into dashes and punctuation dropped."""
    text = _WHITESPACE.sub("-", str(name).lower())
    return _NON_SLUG.sub("", text).replace(":", "")


def nameify(value: Any) -> str:
    return _NON_NAME.sub("", str(value)).replace(":", "")


def block_nameify(phrase: str) -> str:
    """Human readable title for a dashed block or superblock name."""
    preformatted = PREFORMATTED_BLOCK_NAMES.get(phrase)
    if preformatted:
        return preformatted
    words = []
    for word in phrase.split("-"):
        if word in _NO_FORMATTING:
            words.append(word)
        elif word in _PREFORMATTED_WORDS:
            words.append(_PREFORMATTED_WORDS[word])
        else:
            words.append(word[:1].upper() + word[1:])
    return " ".join(words)


__all__ = ["PREFORMATTED_BLOCK_NAMES", "block_nameify", "dasherize", "nameify"]
