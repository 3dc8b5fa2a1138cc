"""Turn one challenge file into a decorated, prepared challenge."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .challenge_parser import parse_markdown, parse_md
from .challenge_types import help_category_for_block
from .dictionaries import CommentMap
from .errors import MissingEnglishSourceError, UnsupportedLanguageError
from .languages import ENGLISH, is_audited_cert, is_supported_language
from .models import BlockMeta
from .paths import block_name_from_path, get_meta_for_block, super_block_info_from_path
from .preparer import prepare_challenge
from .slugs import dasherize
from .translation import parse_translation

logger = logging.getLogger(__name__)

CERTIFICATE_EXTENSION = ".markdown"


class ChallengeCreator:
    """Builds challenges for one language from paths relative to the language root."""

    def __init__(
        self,
        *,
        challenges_dir: Union[str, Path],
        lang: str,
        comment_map: CommentMap,
        meta_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        self._challenges_dir = Path(challenges_dir)
        self._meta_dir = Path(meta_dir) if meta_dir is not None else self._challenges_dir / "_meta"
        self._lang = lang
        self._comment_map = comment_map

    @property
    def lang(self) -> str:
        return self._lang

    def full_path(self, path_lang: str, file_path: str) -> Path:
        return self._challenges_dir / path_lang / file_path

    async def has_english_source(self, file_path: str) -> bool:
        return await asyncio.to_thread(self.full_path(ENGLISH, file_path).exists)

    async def create_challenge(self, file_path: str, meta: Optional[BlockMeta] = None) -> Dict[str, Any]:
        if meta is None:
            meta = await asyncio.to_thread(get_meta_for_block, self._meta_dir, block_name_from_path(file_path))
        super_block = super_block_info_from_path(file_path).name

        if not is_supported_language(self._lang):
            raise UnsupportedLanguageError(self._lang, file_path)
        if self._lang != ENGLISH and not await self.has_english_source(file_path):
            raise MissingEnglishSourceError(file_path, self.full_path(ENGLISH, file_path))

        # un-audited certifications fall back to English until their review is done
        use_english = self._lang == ENGLISH or not is_audited_cert(self._lang, super_block)
        parse = parse_markdown if Path(file_path).suffix == CERTIFICATE_EXTENSION else parse_md

        if use_english:
            challenge = await asyncio.to_thread(parse, self.full_path(ENGLISH, file_path))
        else:
            challenge = await asyncio.to_thread(
                parse_translation,
                self.full_path(ENGLISH, file_path),
                self.full_path(self._lang, file_path),
                self._comment_map,
                self._lang,
                parse,
            )
        return prepare_challenge(self._decorate(challenge, meta, super_block))

    def _decorate(self, challenge: Dict[str, Any], meta: BlockMeta, super_block: str) -> Dict[str, Any]:
        original_title = challenge.pop("originalTitle", None)
        title = challenge.get("title", "")
        challenge["block"] = meta.name
        challenge["dashedName"] = dasherize(title if self._lang == ENGLISH else original_title or title)
        challenge["order"] = meta.order
        challenge["superOrder"] = meta.super_order
        challenge["superBlock"] = super_block
        challenge["challengeOrder"] = meta.challenge_index(challenge.get("id"))
        challenge["isPrivate"] = bool(challenge.get("isPrivate")) or meta.is_private
        challenge["required"] = list(meta.required) + list(challenge.get("required") or [])
        challenge["template"] = meta.template
        challenge["time"] = meta.time
        challenge["helpCategory"] = challenge.get("helpCategory") or help_category_for_block(dasherize(meta.name))
        if challenge["challengeOrder"] == -1:
            logger.debug("Challenge %s is not listed in challengeOrder of %s", challenge.get("id"), meta.name)
        return challenge


__all__ = ["CERTIFICATE_EXTENSION", "ChallengeCreator"]
