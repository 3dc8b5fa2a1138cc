"""Typed failures raised while assembling a curriculum."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class CurriculumError(Exception):
    """Base class for every build failure. Carries the offending path when known."""

    def __init__(self, message: str, *, path: Optional[PathLike] = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class UnsupportedLanguageError(CurriculumError, ValueError):
    def __init__(self, lang: str, file_path: PathLike) -> None:
        super().__init__(f"{lang} is not a accepted language.\n  Trying to parse {file_path}", path=file_path)
        self.lang = lang


class MissingEnglishSourceError(CurriculumError, LookupError):
    def __init__(self, file_path: PathLike, expected_path: PathLike) -> None:
        super().__init__(
            f"Missing English challenge for\n{file_path}\nIt should be in\n{expected_path}\n",
            path=file_path,
        )
        self.expected_path = str(expected_path)


class MissingLanguageRootError(CurriculumError, LookupError):
    def __init__(self, lang: str, root: PathLike) -> None:
        super().__init__(f"No challenges for {lang}; expected them in {root}", path=root)
        self.lang = lang


class InvalidBlockMetaError(CurriculumError, ValueError):
    pass


class MissingSuperBlockError(CurriculumError, LookupError):
    def __init__(self, super_block: str, file_path: PathLike) -> None:
        super().__init__(f"failed to create superBlock {super_block}", path=file_path)
        self.super_block = super_block


class MissingCommentTranslationError(CurriculumError, LookupError):
    def __init__(self, text: str, comment_id: str, lang: str) -> None:
        super().__init__(f"Missing translation for comment\n'{text}'\n        with id of {comment_id} ({lang})")
        self.text = text
        self.comment_id = comment_id
        self.lang = lang


class TranslationMismatchError(CurriculumError, ValueError):
    pass


class ChallengeParseError(CurriculumError, ValueError):
    pass


__all__ = [
    "ChallengeParseError",
    "CurriculumError",
    "InvalidBlockMetaError",
    "MissingCommentTranslationError",
    "MissingEnglishSourceError",
    "MissingLanguageRootError",
    "MissingSuperBlockError",
    "TranslationMismatchError",
    "UnsupportedLanguageError",
]
