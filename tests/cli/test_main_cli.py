from __future__ import annotations

import json
from pathlib import Path

import pytest

from quadkit.cli.main import main


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    for key in [
        "QUADKIT_REPORT_FORMAT",
        "QUADKIT_REPORT_MAX_CAUSES",
        "QUADKIT_REPORT_SHOW_KIND",
        "QUADKIT_REPORT_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as info:
        main(argv)
    return int(info.value.code)


def test_check_iri_success(capsys) -> None:
    assert _run(["check-iri", "http://example.com/s"]) == 0
    assert capsys.readouterr().out.strip() == "http://example.com/s"


def test_check_iri_failure_reports_parser_message(capsys) -> None:
    assert _run(["check-iri", "not an iri"]) == 1

    err = capsys.readouterr().err
    assert err.splitlines()[0] == "No scheme found in an absolute IRI"
    assert "caused by quadkit.core.model.IriParseError" in err


def test_check_bnode_and_lang(capsys) -> None:
    assert _run(["check-bnode", "b0"]) == 0
    assert _run(["check-lang", "en-US"]) == 0
    assert capsys.readouterr().out.splitlines() == ["_:b0", "en-us"]


def test_check_lang_failure_json_report(capsys, monkeypatch) -> None:
    monkeypatch.setenv("QUADKIT_REPORT_FORMAT", "json")

    assert _run(["check-lang", "e"]) == 1

    report = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert report["kind"] == "language_tag"
    assert report["causes"][0]["type"] == "quadkit.core.model.LanguageTagParseError"


def test_decode_reports_missing_file_as_io(tmp_path: Path, capsys) -> None:
    (tmp_path / "quadkit.toml").write_text('[report]\nshow_kind = true\n')

    assert _run(["decode", str(tmp_path / "missing.nt")]) == 1

    first = capsys.readouterr().err.splitlines()[0]
    assert first.startswith("[io] [Errno 2]")


def test_decode_reports_invalid_utf8(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.nt"
    path.write_bytes(b"<http://a> <http://b> \"\xff\" .\n")

    assert _run(["--config", str(tmp_path / "none.toml"), "decode", str(path)]) == 1
    assert "can't decode byte 0xff" in capsys.readouterr().err


def test_decode_success(tmp_path: Path, capsys) -> None:
    path = tmp_path / "ok.nt"
    path.write_text("héllo", encoding="utf-8")

    assert _run(["decode", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "5 characters"


def test_check_xml(tmp_path: Path, capsys) -> None:
    good = tmp_path / "good.rdf"
    good.write_text("<RDF><Description/></RDF>")
    bad = tmp_path / "bad.rdf"
    bad.write_text("<RDF><Description></RDF>")

    assert _run(["check-xml", str(good)]) == 0
    assert capsys.readouterr().out.strip() == "RDF"

    assert _run(["check-xml", str(bad)]) == 1
    assert "mismatched tag" in capsys.readouterr().err


def test_main_without_args_prints_help(capsys) -> None:
    main([])
    assert "usage: quadkit" in capsys.readouterr().out


def test_undecodable_config_still_reports_uniformly(tmp_path: Path, capsys) -> None:
    (tmp_path / "quadkit.toml").write_bytes(b'format = "\xff"\n')

    assert _run(["check-iri", "not an iri"]) == 1
    assert capsys.readouterr().err.splitlines()[0] == "No scheme found in an absolute IRI"
