"""End-to-end tests: HTML + CSS fixture files in, inlined HTML out."""

from pathlib import Path

import pytest

from inlinecss import inline

CASES_DIR = Path(__file__).parent / "cases"
CASES = sorted(path.stem for path in CASES_DIR.glob("*.html"))


def _read(name: str, suffix: str) -> str:
    return (CASES_DIR / f"{name}{suffix}").read_text(encoding="utf-8")


@pytest.mark.parametrize("name", CASES)
def test_case_from_files(name):
    assert inline(_read(name, ".html"), _read(name, ".css")) == _read(name, ".out")


def test_cases_found():
    assert {"newsletter", "untouched"} <= set(CASES)


class TestProperties:
    def test_idempotent_on_own_output(self):
        css = _read("newsletter", ".css")
        once = inline(_read("newsletter", ".html"), css)
        assert inline(once, css) == once

    def test_important_overrides_every_specificity(self):
        html = '<p id="x" class="y" style="color: green"></p>'
        css = "#x.y { color: red } p { color: blue !important }"
        assert 'style="color:blue;"' in inline(html, css)

    @pytest.mark.parametrize("pseudo", ["hover", "active", "focus", "visited", "link"])
    def test_dynamic_rules_never_contribute(self, pseudo):
        html = '<a href="#" class="x">x</a>'
        assert inline(html, f"a.x:{pseudo} {{ color: red }}") == html
