"""Final shaping of a decorated challenge before it enters the curriculum."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from .polyvinyl import create_poly
from .slugs import block_nameify, dasherize, nameify


def arr_to_string(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return "\n".join(str(item) for item in value)
    if value is None:
        return ""
    return str(value)


def files_to_object(files: Iterable[Mapping[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """Key files by ``key`` with head, contents and tail flattened to strings."""
    mapped: Dict[str, Dict[str, Any]] = {}
    for file in files:
        mapped[file["key"]] = {
            **file,
            "head": arr_to_string(file.get("head")),
            "contents": arr_to_string(file.get("contents")),
            "tail": arr_to_string(file.get("tail")),
        }
    return mapped


def prepare_challenge(challenge: Dict[str, Any]) -> Dict[str, Any]:
    challenge["name"] = nameify(challenge.get("title", ""))
    if challenge.get("files") is not None:
        files = files_to_object(challenge["files"])
        challenge["files"] = {
            key: {**create_poly(file), "seed": file["contents"][:]} for key, file in files.items() if file
        }
    if challenge.get("solutionFiles") is not None:
        challenge["solutionFiles"] = files_to_object(challenge["solutionFiles"])
    challenge["block"] = dasherize(challenge.get("block", ""))
    challenge["superBlock"] = block_nameify(challenge.get("superBlock", ""))
    return challenge


__all__ = ["arr_to_string", "files_to_object", "prepare_challenge"]
