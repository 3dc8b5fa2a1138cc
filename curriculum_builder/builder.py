"""Assemble the curriculum for one language from its challenge tree."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .challenge_creator import ChallengeCreator
from .config import Settings, get_settings
from .dictionaries import EMPTY_COMMENT_MAP, CommentMap, create_comment_map
from .errors import CurriculumError, MissingLanguageRootError, MissingSuperBlockError, UnsupportedLanguageError
from .languages import ENGLISH, is_supported_language
from .models import Block, Curriculum, SuperBlock
from .paths import (
    block_name_from_path,
    load_block_meta,
    meta_path_for_block,
    super_block_info,
    super_block_info_from_path,
)
from .walker import WalkEntry, walk

logger = logging.getLogger(__name__)

SKIPPED_FILES = frozenset({"meta.json", ".DS_Store"})


@dataclass
class BuildReport:
    """Curriculum built in collecting mode together with every failure seen."""

    lang: str
    curriculum: Curriculum
    errors: List[CurriculumError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def challenge_count(self) -> int:
        return sum(1 for _ in self.curriculum.iter_challenges())


def _first_error(group: BaseExceptionGroup) -> BaseException:
    error: BaseException = group
    while isinstance(error, BaseExceptionGroup):
        error = error.exceptions[0]
    return error


def _challenge_sort_key(challenge: Dict[str, Any]) -> Tuple[bool, int]:
    order = challenge.get("challengeOrder", -1)
    return (order < 0, order)


class CurriculumBuilder:
    """Walks ``{challenges_dir}/{lang}`` and builds a :class:`Curriculum`.

    ``build`` stops at the first error; ``build_report`` keeps going and
    returns every error next to whatever could be built.
    """

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        comment_map: Optional[CommentMap] = None,
        show_upcoming_changes: Optional[bool] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._comment_map = comment_map
        self._show_upcoming = (
            self._settings.show_upcoming_changes if show_upcoming_changes is None else show_upcoming_changes
        )

    @property
    def comment_map(self) -> CommentMap:
        if self._comment_map is None:
            self._comment_map = create_comment_map(self._settings.dictionaries_dir)
        return self._comment_map

    async def build(self, lang: str) -> Curriculum:
        curriculum, _ = await self._build(lang, collect=False)
        return curriculum

    async def build_report(self, lang: str) -> BuildReport:
        curriculum, errors = await self._build(lang, collect=True)
        return BuildReport(lang=lang, curriculum=curriculum, errors=errors)

    async def _build(self, lang: str, *, collect: bool) -> Tuple[Curriculum, List[CurriculumError]]:
        root = self._settings.challenges_dir_for_lang(lang)
        if not is_supported_language(lang):
            raise UnsupportedLanguageError(lang, root)
        if not root.is_dir():
            raise MissingLanguageRootError(lang, root)
        logger.info("Building %s curriculum from %s", lang, root)
        creator = ChallengeCreator(
            challenges_dir=self._settings.challenges_dir,
            meta_dir=self._settings.meta_dir,
            lang=lang,
            comment_map=self.comment_map if lang != ENGLISH else (self._comment_map or EMPTY_COMMENT_MAP),
        )
        curriculum = Curriculum()
        errors: List[CurriculumError] = []
        pending: List[Tuple[Block, asyncio.Task[Optional[Dict[str, Any]]]]] = []

        try:
            async with asyncio.TaskGroup() as group:
                for entry in walk(root):
                    try:
                        block = self._handle_entry(entry, curriculum)
                    except CurriculumError as exc:
                        if not collect:
                            raise
                        logger.error("%s", exc)
                        errors.append(exc)
                        continue
                    if block is None:
                        continue
                    task = group.create_task(self._create_challenge(creator, entry.path, block, errors if collect else None))
                    pending.append((block, task))
        except BaseExceptionGroup as group_error:
            raise _first_error(group_error) from None

        for block, task in pending:
            challenge = task.result()
            if challenge is not None:
                block.challenges.append(challenge)
        for super_block in curriculum.root.values():
            for block in super_block.blocks.values():
                block.challenges.sort(key=_challenge_sort_key)

        logger.info(
            "Built %s curriculum: %d superblocks, %d challenges, %d errors",
            lang,
            len(curriculum),
            sum(1 for _ in curriculum.iter_challenges()),
            len(errors),
        )
        return curriculum, errors

    def _handle_entry(self, entry: WalkEntry, curriculum: Curriculum) -> Optional[Block]:
        """Register superblocks and blocks; return the owning block for challenge files."""
        if entry.depth == 1 and entry.is_dir:
            order, name = super_block_info(entry.name)
            curriculum[name] = SuperBlock(superBlock=name, order=order)
            return None
        if entry.depth == 2 and entry.is_dir:
            meta = load_block_meta(meta_path_for_block(self._settings.meta_dir, entry.name))
            if meta.is_upcoming_change and not self._show_upcoming:
                logger.info("Skipping upcoming change block %s", entry.name)
                return None
            super_block = curriculum.get(super_block_info_from_path(entry.path).name)
            if super_block is None:
                raise MissingSuperBlockError(super_block_info_from_path(entry.path).name, entry.path)
            super_block.blocks[entry.name] = Block(meta=meta)
            return None
        if entry.is_dir or entry.name in SKIPPED_FILES:
            return None

        super_block_name = super_block_info_from_path(entry.path).name
        super_block = curriculum.get(super_block_name)
        if super_block is None:
            raise MissingSuperBlockError(super_block_name, entry.path)
        block = super_block.blocks.get(block_name_from_path(entry.path))
        if block is None:
            # only happens when an upcoming change block was skipped
            logger.debug("Skipping %s; its block is not part of this build", entry.full_path)
        return block

    async def _create_challenge(
        self,
        creator: ChallengeCreator,
        file_path: str,
        block: Block,
        errors: Optional[List[CurriculumError]],
    ) -> Optional[Dict[str, Any]]:
        try:
            return await creator.create_challenge(file_path, block.meta)
        except CurriculumError as exc:
            if errors is None:
                raise
            logger.error("Failed to build %s: %s", file_path, exc)
            errors.append(exc)
            return None


async def get_challenges_for_lang(
    lang: str,
    *,
    settings: Optional[Settings] = None,
    comment_map: Optional[CommentMap] = None,
) -> Curriculum:
    return await CurriculumBuilder(settings=settings, comment_map=comment_map).build(lang)


__all__ = ["BuildReport", "CurriculumBuilder", "SKIPPED_FILES", "get_challenges_for_lang"]
