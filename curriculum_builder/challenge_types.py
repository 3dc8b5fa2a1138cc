"""Challenge type identifiers and the forum help category for each block."""

from __future__ import annotations

from typing import Dict, Optional

HTML = 0
JS = 1
BACKEND = 2
FRONT_END_PROJECT = 3
BACK_END_PROJECT = 4
JS_PROJECT = 5
MODERN = 6
CERTIFICATE = 7
QUIZ = 8
INVALID = 9
PYTHON_PROJECT = 10
VIDEO = 11

HELP_CATEGORY_MAP: Dict[str, str] = {
    "basic-html-and-html5": "HTML-CSS",
    "basic-css": "HTML-CSS",
    "applied-visual-design": "HTML-CSS",
    "applied-accessibility": "HTML-CSS",
    "responsive-web-design-principles": "HTML-CSS",
    "css-flexbox": "HTML-CSS",
    "css-grid": "HTML-CSS",
    "responsive-web-design-projects": "HTML-CSS",
    "basic-javascript": "JavaScript",
    "es6": "JavaScript",
    "regular-expressions": "JavaScript",
    "debugging": "JavaScript",
    "basic-data-structures": "JavaScript",
    "basic-algorithm-scripting": "JavaScript",
    "object-oriented-programming": "JavaScript",
    "functional-programming": "JavaScript",
    "intermediate-algorithm-scripting": "JavaScript",
    "javascript-algorithms-and-data-structures-projects": "JavaScript",
    "bootstrap": "HTML-CSS",
    "jquery": "JavaScript",
    "sass": "HTML-CSS",
    "react": "JavaScript",
    "redux": "JavaScript",
    "react-and-redux": "JavaScript",
    "data-visualization-with-d3": "JavaScript",
    "json-apis-and-ajax": "JavaScript",
    "managing-packages-with-npm": "Backend Development",
    "basic-node-and-express": "Backend Development",
    "mongodb-and-mongoose": "Backend Development",
    "python-for-everybody": "Python",
    "scientific-computing-with-python-projects": "Python",
    "data-analysis-with-python-course": "Python",
    "data-analysis-with-python-projects": "Python",
    "machine-learning-with-python-projects": "Python",
    "algorithms": "JavaScript",
    "data-structures": "JavaScript",
    "rosetta-code": "JavaScript",
    "project-euler": "JavaScript",
    "take-home-projects": "JavaScript",
}


def help_category_for_block(block: str) -> Optional[str]:
    return HELP_CATEGORY_MAP.get(block)


__all__ = [
    "BACKEND",
    "BACK_END_PROJECT",
    "CERTIFICATE",
    "FRONT_END_PROJECT",
    "HELP_CATEGORY_MAP",
    "HTML",
    "INVALID",
    "JS",
    "JS_PROJECT",
    "MODERN",
    "PYTHON_PROJECT",
    "QUIZ",
    "VIDEO",
    "help_category_for_block",
]
