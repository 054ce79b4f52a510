import json

import pytest

from lyric_rhymes import cli


def test_extract_prints_families(lyrics_file, capsys):
    cli.main(["extract", str(lyrics_file)])
    out = capsys.readouterr().out
    assert "## Шалом" in out
    assert "## Молоко" in out
    assert "skala" in out


def test_extract_json(lyrics_file, capsys):
    cli.main(["extract", str(lyrics_file), "--json", "--track", "шалом"])
    payload = json.loads(capsys.readouterr().out)
    assert [track["title"] for track in payload] == ["Шалом"]
    families = payload[0]["families"]
    assert families[0]["phonetic_tail"] == "skala"
    assert len(families[0]["units"]) == 4


def test_extract_window_flag(lyrics_file, capsys):
    cli.main(["extract", str(lyrics_file), "--json", "--window", "1"])
    payload = json.loads(capsys.readouterr().out)
    for track in payload:
        assert all(link["distance_lines"] == 1 for link in track["links"])


def test_extract_missing_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["extract", str(tmp_path / "missing.md")])
    assert excinfo.value.code == 2


def test_extract_rejects_bad_environment(lyrics_file, monkeypatch):
    monkeypatch.setenv("LYRIC_RHYMES_WINDOW_SIZE", "many")
    with pytest.raises(SystemExit):
        cli.main(["extract", str(lyrics_file)])


def test_extract_rejects_invalid_window(lyrics_file):
    with pytest.raises(SystemExit):
        cli.main(["extract", str(lyrics_file), "--window", "0"])


def test_compare(capsys):
    cli.main(["compare", "пол-оскала", "Ла Скала"])
    out = capsys.readouterr().out
    assert "skala" in out
    assert "Similarity: 1.0" in out
    assert "Match type: exact" in out
    assert "Rhyme: yes" in out


def test_analyze(capsys):
    cli.main(["analyze", "молоко"])
    out = capsys.readouterr().out
    assert "Simplified: malaka" in out
    assert "Tail: laka" in out
    assert "Syllables: 3" in out
