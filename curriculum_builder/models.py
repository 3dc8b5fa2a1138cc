"""Curriculum tree models: superblocks, blocks and their metadata."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, RootModel, StrictBool


class BlockMeta(BaseModel):
    """Block descriptor loaded from ``_meta/{block}/meta.json``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    dashed_name: Optional[str] = Field(default=None, alias="dashedName")
    order: int = 0
    super_order: int = Field(default=0, alias="superOrder")
    super_block: Optional[str] = Field(default=None, alias="superBlock")
    is_private: bool = Field(default=False, alias="isPrivate")
    required: List[Any] = Field(default_factory=list)
    template: Optional[str] = None
    time: Optional[str] = None
    is_upcoming_change: StrictBool = Field(alias="isUpcomingChange")
    challenge_order: List[List[str]] = Field(default_factory=list, alias="challengeOrder")

    def challenge_index(self, challenge_id: Optional[str]) -> int:
        """Position of ``challenge_id`` in ``challengeOrder``, -1 when absent."""
        for index, entry in enumerate(self.challenge_order):
            if entry and entry[0] == challenge_id:
                return index
        return -1


class Block(BaseModel):
    meta: BlockMeta
    challenges: List[Dict[str, Any]] = Field(default_factory=list)


class SuperBlock(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    super_block: str = Field(alias="superBlock")
    order: int = 0
    blocks: Dict[str, Block] = Field(default_factory=dict)


class Curriculum(RootModel[Dict[str, SuperBlock]]):
    """Superblock name to superblock, in the order the tree was walked."""

    root: Dict[str, SuperBlock] = Field(default_factory=dict)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, key: str) -> SuperBlock:
        return self.root[key]

    def __setitem__(self, key: str, value: SuperBlock) -> None:
        self.root[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __len__(self) -> int:
        return len(self.root)

    def get(self, key: str) -> Optional[SuperBlock]:
        return self.root.get(key)

    def items(self) -> Iterator[Tuple[str, SuperBlock]]:
        return iter(self.root.items())

    def iter_challenges(self) -> Iterator[Dict[str, Any]]:
        for super_block in self.root.values():
            for block in super_block.blocks.values():
                yield from block.challenges

    def to_json_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["Block", "BlockMeta", "Curriculum", "SuperBlock"]
