"""Tests for mandated boilerplate extraction."""

from models.schemas.mandated_section import MandatedKind, MandatedSection
from services.mandated_sections import extract_mandated_sections, is_in_mandated_section


DOC = (
    "Intro text.\n"
    "[COMPANY_LEGAL_TEXT]We are an equal opportunity employer.[/COMPANY_LEGAL_TEXT]\n"
    "Middle text.\n"
    "[COMPANY_PREAMBLE]Founded in 1999, we build tools.[/COMPANY_PREAMBLE]\n"
    "Closing text."
)


def test_removes_blocks_and_markers():
    clean, _ = extract_mandated_sections(DOC)
    assert "COMPANY_" not in clean
    assert "equal opportunity" not in clean
    assert "Founded in 1999" not in clean
    assert "Intro text." in clean
    assert "Closing text." in clean


def test_sections_preamble_first():
    _, sections = extract_mandated_sections(DOC)
    assert [s.kind for s in sections] == [MandatedKind.PREAMBLE, MandatedKind.LEGAL]
    assert sections[0].content == "Founded in 1999, we build tools."
    assert sections[1].content == "We are an equal opportunity employer."


def test_multiline_block():
    text = "[COMPANY_LEGAL_TEXT]\nLine one.\nLine two.\n[/COMPANY_LEGAL_TEXT]"
    clean, sections = extract_mandated_sections(text)
    assert clean == ""
    assert "Line two." in sections[0].content


def test_markers_case_insensitive():
    clean, sections = extract_mandated_sections("[company_preamble]x[/Company_Preamble] y")
    assert clean == " y"
    assert len(sections) == 1


def test_unterminated_block_left_in_place():
    text = "Text [COMPANY_LEGAL_TEXT]never closed"
    clean, sections = extract_mandated_sections(text)
    assert clean == text
    assert sections == []


def test_no_blocks():
    clean, sections = extract_mandated_sections("Plain job description.")
    assert clean == "Plain job description."
    assert sections == []


def test_is_in_mandated_section():
    sections = [MandatedSection(kind=MandatedKind.LEGAL, content="A Competitive Benefits package")]
    assert is_in_mandated_section("competitive", sections)
    assert not is_in_mandated_section("aggressive", sections)
    assert not is_in_mandated_section("competitive", [])
