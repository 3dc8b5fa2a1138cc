"""Tests for the challenge and certificate parsers."""

from __future__ import annotations

from pathlib import Path

import pytest

from curriculum_builder.challenge_parser import parse_markdown, parse_md
from curriculum_builder.errors import ChallengeParseError

from conftest import ENGLISH_COMMENT, SAY_HELLO_ID, challenge_md

VIDEO_CHALLENGE = """---
id: 5e7b9f060b6c005b0e76f05b
title: Build your first Python program
challengeType: 11
videoId: aJh7xXX5WkM
---

# --question--

## --text--

What does `print("Hello")` output?

## --answers--

Hello

---

"Hello"

---

Nothing

## --video-solution--

1
"""

CERTIFICATE = """---
id: 561add10cb82ac38a17513bc
title: Responsive Web Design Certificate
challengeType: 7
isPrivate: true
---

## Description

<section id='description'>
Claim your certification.
</section>

## Tests

<section id='tests'>

```yml
tests:
  - id: bd7158d8c442eddfaeb5bd18
    title: Build a Tribute Page
  - id: 587d78af367417b2b2512b03
    title: Build a Survey Form
```

</section>
"""


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_md_reads_front_matter_and_sections(tmp_path: Path) -> None:
    path = _write(tmp_path, "say-hello.md", challenge_md(challenge_id=SAY_HELLO_ID, title="Say Hello to HTML Elements"))
    challenge = parse_md(path)

    assert challenge["id"] == SAY_HELLO_ID
    assert challenge["title"] == "Say Hello to HTML Elements"
    assert challenge["challengeType"] == 0
    assert challenge["forumTopicId"] == 18276
    assert challenge["description"] == "Welcome to the HTML challenges."
    assert challenge["instructions"] == "Change the text of your `h1` element."
    assert challenge["tests"] == [
        {
            "text": "Your `h1` element should have the text `Hello World`.",
            "testString": "assert.isTrue(/hello(\\s)+world/gi.test($('h1').text()));",
        }
    ]


def test_parse_md_builds_seed_and_solution_files(tmp_path: Path) -> None:
    path = _write(tmp_path, "say-hello.md", challenge_md(challenge_id=SAY_HELLO_ID, title="Say Hello"))
    challenge = parse_md(path)

    [seed] = challenge["files"]
    assert seed["key"] == "indexhtml"
    assert seed["ext"] == "html"
    assert seed["name"] == "index"
    assert seed["contents"] == f"<!-- {ENGLISH_COMMENT} -->\n<h1>Hello</h1>"
    assert seed["head"] == ""
    assert challenge["solutions"] == ["<h1>Hello World</h1>"]
    assert challenge["solutionFiles"][0]["contents"] == "<h1>Hello World</h1>"


def test_parse_md_records_editable_region(tmp_path: Path) -> None:
    text = """---
id: abc
title: Step 1
challengeType: 0
---

# --seed--

## --seed-contents--

```css
body {
--fcc-editable-region--
  color: red;
--fcc-editable-region--
}
```

## --before-user-code--

```css
/* reset */
```
"""
    challenge = parse_md(_write(tmp_path, "step-1.md", text))
    [seed] = challenge["files"]
    assert seed["contents"] == "body {\n  color: red;\n}"
    assert seed["editableRegionBoundaries"] == [1, 2]
    assert seed["head"] == "/* reset */"


def test_parse_md_video_question(tmp_path: Path) -> None:
    challenge = parse_md(_write(tmp_path, "video.md", VIDEO_CHALLENGE))
    assert challenge["challengeType"] == 11
    assert "files" not in challenge
    assert challenge["question"] == {
        "text": 'What does `print("Hello")` output?',
        "answers": ["Hello", '"Hello"', "Nothing"],
        "solution": 1,
    }


def test_parse_md_requires_title(tmp_path: Path) -> None:
    path = _write(tmp_path, "broken.md", "---\nid: abc\n---\n\n# --description--\n\nNo title.\n")
    with pytest.raises(ChallengeParseError):
        parse_md(path)


def test_parse_markdown_certificate(tmp_path: Path) -> None:
    challenge = parse_markdown(_write(tmp_path, "cert.markdown", CERTIFICATE))
    assert challenge["challengeType"] == 7
    assert challenge["isPrivate"] is True
    assert challenge["description"] == "Claim your certification."
    assert challenge["tests"] == [
        {"id": "bd7158d8c442eddfaeb5bd18", "title": "Build a Tribute Page"},
        {"id": "587d78af367417b2b2512b03", "title": "Build a Survey Form"},
    ]


def test_unreadable_files_raise_parse_errors(tmp_path: Path) -> None:
    undecodable = tmp_path / "latin1.md"
    undecodable.write_bytes(b"---\nid: x\ntitle: \xff\xfe bad\n---\n")
    with pytest.raises(ChallengeParseError) as excinfo:
        parse_md(undecodable)
    assert excinfo.value.path == str(undecodable)

    with pytest.raises(ChallengeParseError):
        parse_markdown(tmp_path / "missing.markdown")
