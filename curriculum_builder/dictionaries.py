"""Comment translation dictionaries.

Each language directory under the dictionaries root holds a ``comments.json``.
English lists the canonical comments::

    {"COMMENTS_TO_TRANSLATE": [{"id": "...", "text": "..."}],
     "COMMENTS_TO_NOT_TRANSLATE": [{"id": "...", "text": "..."}]}

every other language is a list of ``{"id", "text"}`` entries keyed by the
English ids. :func:`create_comment_map` turns these into a read-only mapping
from English comment text to ``{language: translated text}``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from .errors import CurriculumError, MissingCommentTranslationError
from .languages import ENGLISH

logger = logging.getLogger(__name__)

COMMENTS_FILE = "comments.json"

CommentMap = Mapping[str, Mapping[str, str]]

EMPTY_COMMENT_MAP: CommentMap = MappingProxyType({})


def _load_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def _load_english(dictionaries_dir: Path) -> Dict[str, List[Dict[str, str]]]:
    path = dictionaries_dir / ENGLISH / COMMENTS_FILE
    payload = _load_json(path)
    if not isinstance(payload, dict):
        raise CurriculumError("English comment dictionary must be an object", path=path)
    return {
        "COMMENTS_TO_TRANSLATE": list(payload.get("COMMENTS_TO_TRANSLATE", [])),
        "COMMENTS_TO_NOT_TRANSLATE": list(payload.get("COMMENTS_TO_NOT_TRANSLATE", [])),
    }


def dictionary_languages(dictionaries_dir: Path) -> List[str]:
    """Languages with a dictionary directory, English excluded."""
    return sorted(entry.name for entry in Path(dictionaries_dir).iterdir() if entry.is_dir() and entry.name != ENGLISH)


def get_translatable_comments(dictionaries_dir: Path) -> List[str]:
    english = _load_english(Path(dictionaries_dir))
    return [entry["text"] for entry in english["COMMENTS_TO_TRANSLATE"]]


def _translation_entry(
    dictionaries: Mapping[str, List[Dict[str, str]]],
    *,
    eng_id: str,
    text: str,
) -> Dict[str, str]:
    entry: Dict[str, str] = {}
    for lang, comments in dictionaries.items():
        match = next((item for item in comments if item.get("id") == eng_id), None)
        if match is None:
            raise MissingCommentTranslationError(text, eng_id, lang)
        entry[lang] = match["text"]
    return entry


def create_comment_map(dictionaries_dir: Path) -> CommentMap:
    """Build the English comment text to translation mapping.

    Fails on the first translatable comment that any language lacks, so an
    incomplete dictionary stops the build before any challenge is parsed.
    """
    root = Path(dictionaries_dir)
    languages = dictionary_languages(root)
    dictionaries: Dict[str, List[Dict[str, str]]] = {}
    for lang in languages:
        payload = _load_json(root / lang / COMMENTS_FILE)
        if not isinstance(payload, list):
            raise CurriculumError(f"Comment dictionary for {lang} must be a list", path=root / lang / COMMENTS_FILE)
        dictionaries[lang] = payload

    english = _load_english(root)

    comment_map: Dict[str, Mapping[str, str]] = {}
    for item in english["COMMENTS_TO_TRANSLATE"]:
        entry = _translation_entry(dictionaries, eng_id=item["id"], text=item["text"])
        comment_map[item["text"]] = MappingProxyType(entry)

    for item in english["COMMENTS_TO_NOT_TRANSLATE"]:
        text = item["text"]
        comment_map[text] = MappingProxyType({lang: text for lang in languages})

    logger.debug("Loaded %d comments for languages: %s", len(comment_map), ", ".join(languages))
    return MappingProxyType(comment_map)


__all__ = [
    "COMMENTS_FILE",
    "EMPTY_COMMENT_MAP",
    "CommentMap",
    "create_comment_map",
    "dictionary_languages",
    "get_translatable_comments",
]
