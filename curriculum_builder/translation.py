"""Merge translated challenges with their English source.

The English parse is authoritative for code (seeds, test strings, solutions)
while the translated parse supplies prose. Code comments in the English seed
are swapped for their translation when the comment map knows them.
"""

from __future__ import annotations

import copy
import logging
import re
from pathlib import Path
from typing import Any, Callable, Dict, Sequence, Union

from .challenge_parser import parse_md
from .challenge_types import CERTIFICATE, VIDEO
from .dictionaries import CommentMap
from .errors import TranslationMismatchError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
Parser = Callable[[PathLike], Dict[str, Any]]

_INLINE = re.compile(r"((?<!https:)(?<!http:)//[ \t]*)(.*?)([ \t]*)$", re.MULTILINE)
_MULTILINE = re.compile(r"(/\*\s*)(.*?)(\s*\*/)", re.DOTALL)
_HTML = re.compile(r"(<!--\s*)(.*?)(\s*-->)", re.DOTALL)
_HASH = re.compile(r"(#[ \t]*)(.*?)([ \t]*)$", re.MULTILINE)
_STYLE = re.compile(r"<style[^>]*>.*?</style>", re.DOTALL)
_SCRIPT = re.compile(r"<script[^>]*>.*?</script>", re.DOTALL)


def _replacer(lang: str, comment_map: CommentMap) -> Callable[[re.Match[str]], str]:
    def replace(match: re.Match[str]) -> str:
        before, comment, after = match.group(1), match.group(2), match.group(3)
        translations = comment_map.get(comment)
        if translations is None or lang not in translations:
            return match.group(0)
        return f"{before}{translations[lang]}{after}"

    return replace


def _within(text: str, block: re.Pattern[str], inner: Sequence[re.Pattern[str]], replace: Callable[[re.Match[str]], str]) -> str:
    def translate_block(match: re.Match[str]) -> str:
        chunk = match.group(0)
        for pattern in inner:
            chunk = pattern.sub(replace, chunk)
        return chunk

    return block.sub(translate_block, text)


def translate_comments(text: str, lang: str, comment_map: CommentMap, code_lang: str) -> str:
    """Replace every known comment in ``text`` written in ``code_lang``."""
    replace = _replacer(lang, comment_map)
    if code_lang in {"js", "jsx"}:
        return _MULTILINE.sub(replace, _INLINE.sub(replace, text))
    if code_lang == "css":
        return _MULTILINE.sub(replace, text)
    if code_lang == "html":
        text = _within(text, _STYLE, (_MULTILINE,), replace)
        text = _HTML.sub(replace, text)
        return _within(text, _SCRIPT, (_INLINE, _MULTILINE), replace)
    if code_lang == "py":
        return _HASH.sub(replace, text)
    return text


def translate_comments_in_challenge(challenge: Dict[str, Any], lang: str, comment_map: CommentMap) -> Dict[str, Any]:
    """Return a copy of ``challenge`` with seed file comments translated."""
    translated = copy.deepcopy(challenge)
    for file in translated.get("files") or []:
        if file.get("contents"):
            file["contents"] = translate_comments(file["contents"], lang, comment_map, file.get("ext", ""))
    return translated


def merge_challenges(eng_chal: Dict[str, Any], trans_chal: Dict[str, Any]) -> Dict[str, Any]:
    eng_tests = eng_chal.get("tests") or []
    trans_tests = trans_chal.get("tests")
    if trans_tests is None or len(trans_tests) != len(eng_tests):
        raise TranslationMismatchError(
            "Challenges in both languages must have the same number of tests.\n"
            f"    title:  {eng_chal.get('title')}\n"
            f"    localeTitle: {trans_chal.get('title')}"
        )

    is_certificate = eng_chal.get("challengeType") == CERTIFICATE
    if is_certificate:
        tests = [{"title": trans["title"], "id": eng["id"]} for trans, eng in zip(trans_tests, eng_tests)]
    else:
        tests = [{"text": trans["text"], "testString": eng["testString"]} for trans, eng in zip(trans_tests, eng_tests)]

    challenge = dict(eng_chal)
    challenge.update(
        {
            "description": trans_chal.get("description"),
            "instructions": trans_chal.get("instructions"),
            "originalTitle": eng_chal.get("title"),
            "title": trans_chal.get("title") or eng_chal.get("title"),
            "forumTopicId": trans_chal.get("forumTopicId"),
            "tests": tests,
        }
    )
    if "question" in trans_chal:
        challenge["question"] = trans_chal["question"]
    # certificates have no forum topics
    if is_certificate:
        challenge.pop("forumTopicId", None)
    return challenge


def parse_translation(
    eng_path: PathLike,
    trans_path: PathLike,
    comment_map: CommentMap,
    lang: str,
    parse: Parser = parse_md,
) -> Dict[str, Any]:
    eng_chal = parse(eng_path)
    translated_chal = parse(trans_path)

    if eng_chal.get("challengeType") != VIDEO:
        eng_chal = translate_comments_in_challenge(eng_chal, lang, comment_map)
    else:
        # video challenges carry no seed code; keep whatever the translation has
        logger.debug("Skipping comment translation for video challenge %s", trans_path)
        if "files" in translated_chal:
            eng_chal = {**eng_chal, "files": translated_chal["files"]}
    return merge_challenges(eng_chal, translated_chal)


__all__ = [
    "merge_challenges",
    "parse_translation",
    "translate_comments",
    "translate_comments_in_challenge",
]
