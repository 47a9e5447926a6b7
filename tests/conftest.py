"""Shared test fixtures for templint."""

from __future__ import annotations

from pathlib import Path

import pytest

from templint.service.analyzer import TemplateAnalyzer
from templint.settings import Settings

SAMPLE_TEMPLATE = """\
Dear {Client Name},

{IF Gender = "F"}Ms.{END IF}{IF Gender = "M"}Mr.{END IF} {Last Name}
{ASK(Amount, "Settlement amount?")}
{INPUT Reference}
Regards
"""

BROKEN_TEMPLATE = "{IF Married}spouse{END IF} {IF Kids}children }\n{Name"

# Plain RTF document whose body carries escaped template braces.
SAMPLE_RTF = (
    r"{\rtf1\ansi\deff0 {\fonttbl{\f0 Arial;}}"
    r"\f0 Dear \{Name\},\par"
    r"\{IF Married\}spouse\par}"
)


@pytest.fixture
def settings() -> Settings:
    return Settings(context_padding=35)


@pytest.fixture
def analyzer(settings: Settings) -> TemplateAnalyzer:
    return TemplateAnalyzer(settings)


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A directory with two templates, one nested template and a non-template file."""
    (tmp_path / "letter.rtf").write_text("{IF a}yes{END IF}", encoding="utf-8")
    (tmp_path / "memo.RTF").write_text("{IF a}no closer", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("{ignored", encoding="utf-8")
    nested = tmp_path / "archive"
    nested.mkdir()
    (nested / "old.rtf").write_text("}", encoding="utf-8")
    return tmp_path
