from __future__ import annotations

import pytest

from segmentation.lines import BodyLine, ChapterLine, SectionLine, classify_line, split_lines


def test_chapter_line():
    assert classify_line("1 kap. Inledande bestämmelser") == ChapterLine(
        no="1", title="Inledande bestämmelser"
    )


def test_chapter_line_is_case_insensitive_and_may_lack_title():
    assert classify_line("12 KAP.") == ChapterLine(no="12", title="")


@pytest.mark.parametrize(
    ("line", "no", "rest"),
    [
        ("1 §. Lagens innehåll (2020/119)", "1", "Lagens innehåll (2020/119)"),
        ("1a §. (2020/119) Lagens tillämpningsområde", "1a", "(2020/119) Lagens tillämpningsområde"),
        ("12 §", "12", ""),
        ("7a§ Tillstånd", "7a", "Tillstånd"),
    ],
)
def test_section_line(line, no, rest):
    assert classify_line(line) == SectionLine(no=no, rest=rest)


def test_section_header_reconstruction():
    assert SectionLine(no="1", rest="Lagens innehåll").header() == "1 §. Lagens innehåll"
    assert SectionLine(no="12", rest="").header() == "12 §"


@pytest.mark.parametrize(
    "line",
    [
        "I 5 kap. finns särskilda bestämmelser",
        "Se 8 och 9 kap.",
        "enligt 3 § i lagen",
        "",
    ],
)
def test_other_lines_are_body(line):
    assert isinstance(classify_line(line), BodyLine)


def test_blank_body_line():
    assert classify_line("   ").blank


def test_split_lines_trims_and_collapses_spaces():
    assert split_lines("  a   b \r\n\tc\rd") == ["a b", "c", "d"]
