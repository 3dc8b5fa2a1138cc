"""Name conventions of the challenge tree.

Challenge files are addressed relative to a language root as
``{order}-{superblock}/{block}/{file}``; block metadata lives at
``_meta/{block}/meta.json``.
"""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import NamedTuple, Union

from pydantic import ValidationError

from .errors import InvalidBlockMetaError
from .models import BlockMeta

META_FILE = "meta.json"

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class SuperBlockInfo(NamedTuple):
    order: int
    name: str


def super_block_info(file_name: str) -> SuperBlockInfo:
    """Split ``"08-coding-interview-prep"`` into ``(8, "coding-interview-prep")``.

    Names without a numeric prefix keep their full name with order 0.
    """
    maybe_order, _, rest = file_name.partition("-")
    match = _LEADING_INT.match(maybe_order)
    if match is None:
        return SuperBlockInfo(order=0, name=file_name)
    return SuperBlockInfo(order=int(match.group(0)), name=rest)


def super_block_info_from_path(file_path: str) -> SuperBlockInfo:
    return super_block_info(file_path.split(os.sep)[0])


def block_name_from_path(file_path: str) -> str:
    parts = file_path.split(os.sep)
    return parts[1] if len(parts) > 1 else ""


def meta_path_for_block(meta_dir: Union[str, Path], block: str) -> Path:
    return Path(meta_dir) / block / META_FILE


def load_block_meta(meta_path: Union[str, Path]) -> BlockMeta:
    path = Path(meta_path)
    try:
        with path.open(encoding="utf-8") as handle:
            raw = json.load(handle)
    except FileNotFoundError as exc:
        raise InvalidBlockMetaError(f"meta file at {path} does not exist", path=path) from exc
    except json.JSONDecodeError as exc:
        raise InvalidBlockMetaError(f"meta file at {path} is not valid JSON: {exc}", path=path) from exc

    if not isinstance(raw, dict) or not isinstance(raw.get("isUpcomingChange"), bool):
        raise InvalidBlockMetaError(
            f"meta file at {path} is missing 'isUpcomingChange', it must be 'true' or 'false'",
            path=path,
        )
    try:
        return BlockMeta.model_validate(raw)
    except ValidationError as exc:
        raise InvalidBlockMetaError(f"meta file at {path} is invalid: {exc}", path=path) from exc


def get_meta_for_block(meta_dir: Union[str, Path], block: str) -> BlockMeta:
    return load_block_meta(meta_path_for_block(meta_dir, block))


__all__ = [
    "META_FILE",
    "SuperBlockInfo",
    "block_name_from_path",
    "get_meta_for_block",
    "load_block_meta",
    "meta_path_for_block",
    "super_block_info",
    "super_block_info_from_path",
]
