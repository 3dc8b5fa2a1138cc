from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from curriculum_builder.config import Settings

SUPER_BLOCK_DIR = "01-responsive-web-design"
BLOCK = "basic-html-and-html5"

SAY_HELLO_ID = "bd7123c8c441eddfaeb5bdef"
HEADLINE_ID = "bad87fee1348bd9aedf0887a"

ENGLISH_COMMENT = "Only change code below this line"
SPANISH_COMMENT = "Solo cambia el código debajo de esta línea"
CHINESE_COMMENT = "只修改这一行下面的代码"


def challenge_md(
    *,
    challenge_id: str,
    title: str,
    description: str = "Welcome to the HTML challenges.",
    hint: str = "Your `h1` element should have the text `Hello World`.",
    comment: str = ENGLISH_COMMENT,
    challenge_type: int = 0,
    extra_front_matter: str = "",
) -> str:
    return f"""---
id: {challenge_id}
title: {title}
challengeType: {challenge_type}
forumTopicId: 18276
{extra_front_matter}---

# --description--

{description}

# --instructions--

Change the text of your `h1` element.

# --hints--

{hint}

```js
assert.isTrue(/hello(\\s)+world/gi.test($('h1').text()));
```

# --seed--

## --seed-contents--

```html
<!-- {comment} -->
<h1>Hello</h1>
```

# --solutions--

```html
<h1>Hello World</h1>
```
"""


class CurriculumTree:
    """Writes a small challenge tree with dictionaries under ``tmp_path``."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.challenges_dir = root / "challenges"
        self.dictionaries_dir = root / "dictionaries"
        self.challenges_dir.mkdir()
        self.dictionaries_dir.mkdir()

    def write_meta(self, block: str, **fields: Any) -> Path:
        payload: Dict[str, Any] = {
            "name": block.replace("-", " ").title(),
            "dashedName": block,
            "order": 0,
            "superOrder": 1,
            "isPrivate": False,
            "isUpcomingChange": False,
            "challengeOrder": [],
        }
        payload.update(fields)
        path = self.challenges_dir / "_meta" / block / "meta.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def write_challenge(self, lang: str, relative: str, text: str) -> Path:
        path = self.challenges_dir / lang / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def write_dictionaries(
        self,
        translations: Optional[Dict[str, List[Dict[str, str]]]] = None,
        to_translate: Optional[List[Dict[str, str]]] = None,
        not_to_translate: Optional[List[Dict[str, str]]] = None,
    ) -> None:
        english = {
            "COMMENTS_TO_TRANSLATE": to_translate if to_translate is not None else [{"id": "c1", "text": ENGLISH_COMMENT}],
            "COMMENTS_TO_NOT_TRANSLATE": not_to_translate
            if not_to_translate is not None
            else [{"id": "n1", "text": "Hello World"}],
        }
        if translations is None:
            translations = {
                "espanol": [{"id": "c1", "text": SPANISH_COMMENT}],
                "chinese": [{"id": "c1", "text": CHINESE_COMMENT}],
            }
        self._write_json(self.dictionaries_dir / "english" / "comments.json", english)
        for lang, entries in translations.items():
            self._write_json(self.dictionaries_dir / lang / "comments.json", entries)

    def settings(self, *, show_upcoming_changes: bool = False) -> Settings:
        return Settings(
            CURRICULUM_CHALLENGES_DIR=self.challenges_dir,
            CURRICULUM_DICTIONARIES_DIR=self.dictionaries_dir,
            SHOW_UPCOMING_CHANGES=show_upcoming_changes,
        )

    @staticmethod
    def _write_json(path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def tree(tmp_path: Path) -> CurriculumTree:
    return CurriculumTree(tmp_path)


@pytest.fixture
def basic_tree(tree: CurriculumTree) -> CurriculumTree:
    """English and Spanish copies of a two challenge block plus dictionaries."""
    tree.write_dictionaries()
    tree.write_meta(
        BLOCK,
        name="Basic HTML and HTML5",
        order=0,
        superOrder=1,
        challengeOrder=[[SAY_HELLO_ID, "Say Hello to HTML Elements"], [HEADLINE_ID, "Headline with the h2 Element"]],
    )
    for lang in ("english", "espanol"):
        spanish = lang == "espanol"
        tree.write_challenge(
            lang,
            f"{SUPER_BLOCK_DIR}/{BLOCK}/say-hello-to-html-elements.md",
            challenge_md(
                challenge_id=SAY_HELLO_ID,
                title="Saluda a los elementos HTML" if spanish else "Say Hello to HTML Elements",
                description="Bienvenido." if spanish else "Welcome to the HTML challenges.",
                hint="Tu elemento `h1` debe tener el texto `Hello World`." if spanish else "Your `h1` element should have the text `Hello World`.",
            ),
        )
        tree.write_challenge(
            lang,
            f"{SUPER_BLOCK_DIR}/{BLOCK}/headline-with-the-h2-element.md",
            challenge_md(
                challenge_id=HEADLINE_ID,
                title="Titular con el elemento h2" if spanish else "Headline with the h2 Element",
            ),
        )
    return tree
