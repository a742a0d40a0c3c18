from __future__ import annotations

import json

import pytest

from lsi.cli import build_parser, main


def test_normalize_command(tmp_path, capsys):
    path = tmp_path / "strona.txt"
    path.write_text("tillämp-\nning\n\n\n\nslut", encoding="utf-8")

    main(["normalize", str(path)])

    assert capsys.readouterr().out == "tillämpning\n\nslut\n"


def test_segment_command_writes_json(tmp_path, sample_law_text):
    path = tmp_path / "radiolag.txt"
    path.write_text(sample_law_text, encoding="utf-8")

    main(["segment", str(path), "--law-code", "N 1", "--law-name", "Radiolag"])

    data = json.loads((tmp_path / "radiolag.chunks.json").read_text(encoding="utf-8"))
    assert [d["metadata"]["section_no"] for d in data] == ["1", "1a"]
    assert data[0]["metadata"]["law_code"] == "N 1"
    assert data[0]["metadata"]["source"] == "radiolag.txt"
    assert data[1]["text"].startswith("1a §. (2020/119) Lagens tillämpningsområde")


def test_segment_command_with_header_and_no_output(tmp_path, sample_law_text):
    path = tmp_path / "radiolag.txt"
    path.write_text(sample_law_text, encoding="utf-8")

    main(["segment", str(path), "--out", "none", "--with-header", "--show"])

    assert not (tmp_path / "radiolag.chunks.json").exists()


def test_ingest_writes_chunks_json(tmp_path, compendium_pdf):
    path = tmp_path / "lagsamling.pdf"
    path.write_bytes(compendium_pdf)

    # domyślna geometria; sprawdzamy tylko przebieg komendy i zapis pliku
    main(["ingest", str(path), "--show"])

    data = json.loads((tmp_path / "lagsamling.chunks.json").read_text(encoding="utf-8"))
    assert isinstance(data, list)


@pytest.mark.parametrize(
    "argv",
    [
        ["ingest", "brak.pdf"],
        ["segment", "brak.txt"],
        ["normalize", "brak.txt"],
    ],
)
def test_missing_input_exits_with_error(tmp_path, monkeypatch, argv):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 1


def test_ingest_rejects_non_pdf(tmp_path):
    path = tmp_path / "lag.txt"
    path.write_text("x", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["ingest", str(path)])


def test_ingest_reports_unreadable_pdf(tmp_path):
    path = tmp_path / "trasig.pdf"
    path.write_bytes(b"inte en pdf")
    with pytest.raises(SystemExit) as exc_info:
        main(["ingest", str(path)])
    assert exc_info.value.code == 1


def test_version(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--version"])
    assert "lsi 0.1.0" in capsys.readouterr().out


def test_segment_output_keeps_dotted_stem(tmp_path, sample_law_text):
    for name in ("lag.v1.txt", "lag.v2.txt"):
        (tmp_path / name).write_text(sample_law_text, encoding="utf-8")
        main(["segment", str(tmp_path / name)])

    assert (tmp_path / "lag.v1.chunks.json").exists()
    assert (tmp_path / "lag.v2.chunks.json").exists()
    assert not (tmp_path / "lag.chunks.json").exists()


def test_ingest_output_keeps_dotted_stem(tmp_path, compendium_pdf):
    path = tmp_path / "lagsamling.2024.pdf"
    path.write_bytes(compendium_pdf)

    main(["ingest", str(path)])

    assert (tmp_path / "lagsamling.2024.chunks.json").exists()
