from __future__ import annotations

from data_model import PageText
from segmentation.aggregator import aggregate


def test_groups_pages_by_law_code_in_first_seen_order():
    pages = [
        PageText("a1", "A 1", "Lag A"),
        PageText("b1", "B 2", "Lag B"),
        PageText("a2", "A 1", "Lag A"),
        PageText("b2", "B 2", "Lag B"),
    ]
    instruments = aggregate(pages)

    assert [i.law_code for i in instruments] == ["A 1", "B 2"]
    assert instruments[0].text == "a1\na2"
    assert instruments[1].text == "b1\nb2"
    assert instruments[0].metadata["segment_type"] == "INSTRUMENT"


def test_first_law_name_wins():
    pages = [
        PageText("p1", "A 1", "Första namnet"),
        PageText("p2", "A 1", "Andra namnet"),
    ]
    (instrument,) = aggregate(pages)
    assert instrument.law_name == "Första namnet"


def test_pages_without_code_form_one_unidentified_instrument():
    pages = [
        PageText("x1"),
        PageText("a1", "A 1", "Lag A"),
        PageText("x2"),
    ]
    instruments = aggregate(pages)
    assert [i.law_code for i in instruments] == ["", "A 1"]
    assert instruments[0].text == "x1\nx2"
    assert instruments[0].law_name == ""


def test_extra_metadata_is_copied_to_every_instrument():
    pages = [PageText("a", "A 1", "Lag A"), PageText("b", "B 2", "Lag B")]
    instruments = aggregate(pages, extra_metadata={"source": "lagsamling.pdf"})
    assert all(i.metadata["source"] == "lagsamling.pdf" for i in instruments)
    instruments[0].metadata["source"] = "changed"
    assert instruments[1].metadata["source"] == "lagsamling.pdf"


def test_no_pages():
    assert aggregate([]) == []
