"""Parsers for challenge source files.

Two formats live in the challenge tree:

* ``.md`` challenges: YAML front matter followed by ``# --section--`` blocks
  (description, instructions, hints, seed, solutions, question).
* ``.markdown`` certificates: YAML front matter followed by ``## Heading``
  sections, with the required projects listed in a fenced ``yml`` block under
  ``## Tests``.

Both return a plain ``dict`` whose keys follow the front matter's camelCase.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import frontmatter
import yaml

from .errors import ChallengeParseError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

EDITABLE_REGION_MARKER = "--fcc-editable-region--"
SEED_FILE_NAME = "index"

_TOP_SECTION = re.compile(r"^# --([a-z-]+)--[ \t]*$", re.MULTILINE)
_SUB_SECTION = re.compile(r"^## --([a-z-]+)--[ \t]*$", re.MULTILINE)
_CERT_SECTION = re.compile(r"^## ([A-Za-z ]+?)[ \t]*$", re.MULTILINE)
_FENCE = re.compile(r"^```([\w+-]*)[ \t]*\n(.*?)^```[ \t]*$", re.MULTILINE | re.DOTALL)
_SEPARATOR = re.compile(r"^---[ \t]*$", re.MULTILINE)
_SECTION_TAG = re.compile(r"</?section[^>]*>")

_EXT_ALIASES = {"javascript": "js", "py": "py", "python": "py", "yaml": "yml"}


def _split_sections(content: str, pattern: re.Pattern[str]) -> Dict[str, str]:
    sections: Dict[str, str] = {}
    matches = list(pattern.finditer(content))
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(content)
        sections[match.group(1).strip().lower()] = content[match.end() : end].strip("\n")
    return sections


def _fenced_blocks(text: str) -> List[Tuple[str, str, int, int]]:
    """Return ``(lang, code, start, end)`` for every fenced block in ``text``."""
    blocks = []
    for match in _FENCE.finditer(text):
        lang = match.group(1).lower()
        blocks.append((_EXT_ALIASES.get(lang, lang), match.group(2).rstrip("\n"), match.start(), match.end()))
    return blocks


def _parse_tests(hints: str) -> List[Dict[str, str]]:
    tests: List[Dict[str, str]] = []
    cursor = 0
    for _, code, start, end in _fenced_blocks(hints):
        tests.append({"text": hints[cursor:start].strip(), "testString": code})
        cursor = end
    trailing = hints[cursor:].strip()
    if trailing:
        tests.append({"text": trailing, "testString": ""})
    return tests


def _strip_editable_regions(code: str) -> Tuple[str, List[int]]:
    boundaries: List[int] = []
    kept: List[str] = []
    for line in code.split("\n"):
        if EDITABLE_REGION_MARKER in line:
            boundaries.append(len(kept))
            continue
        kept.append(line)
    return "\n".join(kept), boundaries


def _files_by_ext(text: str) -> Dict[str, str]:
    return {lang: code for lang, code, _, _ in _fenced_blocks(text)}


def _parse_seed(seed: str) -> List[Dict[str, Any]]:
    parts = _split_sections(seed, _SUB_SECTION)
    contents = _files_by_ext(parts.get("seed-contents", ""))
    heads = _files_by_ext(parts.get("before-user-code", ""))
    tails = _files_by_ext(parts.get("after-user-code", ""))

    files = []
    for ext, code in contents.items():
        code, boundaries = _strip_editable_regions(code)
        files.append(
            {
                "key": f"{SEED_FILE_NAME}{ext}",
                "ext": ext,
                "name": SEED_FILE_NAME,
                "contents": code,
                "head": heads.get(ext, ""),
                "tail": tails.get(ext, ""),
                "editableRegionBoundaries": boundaries,
            }
        )
    return files


def _parse_solutions(text: str) -> List[List[Dict[str, Any]]]:
    solutions = []
    for chunk in _SEPARATOR.split(text):
        files = [
            {
                "key": f"{SEED_FILE_NAME}{ext}",
                "ext": ext,
                "name": SEED_FILE_NAME,
                "contents": code,
                "head": "",
                "tail": "",
            }
            for ext, code in _files_by_ext(chunk).items()
        ]
        if files:
            solutions.append(files)
    return solutions


def _parse_question(text: str) -> Dict[str, Any]:
    parts = _split_sections(text, _SUB_SECTION)
    answers = [answer.strip() for answer in _SEPARATOR.split(parts.get("answers", "")) if answer.strip()]
    solution_raw = parts.get("video-solution", "").strip()
    try:
        solution: Optional[int] = int(solution_raw)
    except ValueError:
        solution = None
    return {"text": parts.get("text", "").strip(), "answers": answers, "solution": solution}


def _load(path: PathLike) -> frontmatter.Post:
    try:
        return frontmatter.load(str(path), encoding="utf-8")
    except yaml.YAMLError as exc:
        raise ChallengeParseError(f"Invalid front matter in {path}: {exc}", path=path) from exc
    except UnicodeDecodeError as exc:
        raise ChallengeParseError(f"Challenge at {path} is not valid UTF-8: {exc}", path=path) from exc
    except OSError as exc:
        raise ChallengeParseError(f"Could not read challenge at {path}: {exc}", path=path) from exc


def _base_challenge(post: frontmatter.Post, path: PathLike) -> Dict[str, Any]:
    challenge: Dict[str, Any] = dict(post.metadata)
    if "title" not in challenge:
        raise ChallengeParseError(f"Challenge at {path} has no title", path=path)
    if "id" in challenge:
        challenge["id"] = str(challenge["id"])
    return challenge


def parse_md(path: PathLike) -> Dict[str, Any]:
    """Parse a section based ``.md`` challenge."""
    post = _load(path)
    challenge = _base_challenge(post, path)
    sections = _split_sections(post.content, _TOP_SECTION)

    challenge["description"] = sections.get("description", "").strip()
    challenge["instructions"] = sections.get("instructions", "").strip()
    challenge["tests"] = _parse_tests(sections.get("hints", ""))

    if "seed" in sections:
        challenge["files"] = _parse_seed(sections["seed"])
    if "solutions" in sections:
        solutions = _parse_solutions(sections["solutions"])
        challenge["solutions"] = ["\n".join(file["contents"] for file in files) for files in solutions]
        if solutions:
            challenge["solutionFiles"] = solutions[0]
    if "question" in sections:
        challenge["question"] = _parse_question(sections["question"])

    logger.debug("Parsed %s (%d tests)", path, len(challenge["tests"]))
    return challenge


def parse_markdown(path: PathLike) -> Dict[str, Any]:
    """Parse a ``.markdown`` certificate."""
    post = _load(path)
    challenge = _base_challenge(post, path)
    sections = _split_sections(_SECTION_TAG.sub("", post.content), _CERT_SECTION)

    challenge["description"] = sections.get("description", "").strip()
    challenge["instructions"] = sections.get("instructions", "").strip()

    tests: List[Dict[str, Any]] = []
    for lang, code, _, _ in _fenced_blocks(sections.get("tests", "")):
        if lang not in {"yml", ""}:
            continue
        try:
            payload = yaml.safe_load(code) or {}
        except yaml.YAMLError as exc:
            raise ChallengeParseError(f"Invalid tests block in {path}: {exc}", path=path) from exc
        for entry in payload.get("tests") or []:
            tests.append({"id": str(entry.get("id", "")), "title": str(entry.get("title", ""))})
    challenge["tests"] = tests
    return challenge


__all__ = ["EDITABLE_REGION_MARKER", "parse_markdown", "parse_md"]
