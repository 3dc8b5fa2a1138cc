"""In-memory file records used for challenge seed files."""

from __future__ import annotations

from typing import Any, Dict, Mapping


def create_poly(file: Mapping[str, Any]) -> Dict[str, Any]:
    """Normalise a parsed file into a poly record with path, key and history.

    Files parsed from older content carry only a ``key``; the name falls back
    to it and the extension to an empty string.
    """
    contents = file.get("contents")
    if not isinstance(contents, str):
        raise TypeError(f"contents must be a string but got {contents!r}")
    name = file.get("name") or file.get("key") or ""
    ext = file.get("ext") or ""
    if not isinstance(name, str) or not isinstance(ext, str):
        raise TypeError(f"name and ext must be strings but got {name!r}, {ext!r}")

    path = f"{name}.{ext}" if ext else name
    history = file.get("history")
    poly = {key: value for key, value in file.items() if key not in {"name", "ext", "contents", "history"}}
    poly.update(
        {
            "history": list(history) if isinstance(history, list) else [path],
            "name": name,
            "ext": ext,
            "path": path,
            "key": file.get("key") or f"{name}{ext}",
            "contents": contents,
            "error": None,
        }
    )
    return poly


__all__ = ["create_poly"]
