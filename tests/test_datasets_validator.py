from pathlib import Path
import pytest
from packages.datasets import validate_dictionary, pretty_summary, iter_words
from packages.engine import DictionaryUnreadable


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_dictionary_happy_path(tmp_path: Path):
    d = tmp_path / "words.txt"
    _write(d, ["crane", "raise", "stare", "cranes"])

    rep = validate_dictionary(str(d))
    assert rep["passed"] is True
    assert rep["count"] == 4 and rep["unique_count"] == 4
    assert rep["lengths"] == {5: 3, 6: 1}
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=4" in s and "lengths=5:3,6:1" in s and s.endswith("OK")


def test_validate_dictionary_flags_duplicates_and_blanks(tmp_path: Path):
    d = tmp_path / "words.txt"
    d.write_text("crane\n\ncrane\nstare\n", encoding="utf-8")

    rep = validate_dictionary(str(d))
    assert rep["passed"] is False
    assert rep["blank_lines"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("blank" in msg for msg in rep["issues"])


def test_validate_dictionary_missing_file(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_iter_words_strips_crlf_and_keeps_blanks(tmp_path: Path):
    d = tmp_path / "words.txt"
    d.write_bytes("crane\r\n\r\nhöhe\nstare".encode("utf-8"))
    assert list(iter_words(d)) == ["crane", "", "höhe", "stare"]


def test_iter_words_missing_file(tmp_path: Path):
    with pytest.raises(DictionaryUnreadable) as ei:
        list(iter_words(tmp_path / "nope.txt"))
    assert "does not exist" in ei.value.reason


def test_iter_words_bad_encoding(tmp_path: Path):
    d = tmp_path / "words.txt"
    d.write_bytes(b"crane\n\xff\xfe\n")
    with pytest.raises(DictionaryUnreadable):
        list(iter_words(d))


def test_iter_words_directory_is_unreadable(tmp_path: Path):
    with pytest.raises(DictionaryUnreadable):
        list(iter_words(tmp_path))
