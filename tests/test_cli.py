from pathlib import Path
import pytest
from apps.cli.guess import main, build_parser, GuessConfig, HEADER


def _dict(tmp_path: Path, lines) -> str:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def test_cli_correct_spot(tmp_path: Path, capsys):
    d = _dict(tmp_path, ["apple", "mango", "grape"])
    assert main(["--dictionary", d, "--correct-spot", "5:e"]) == 0
    out = capsys.readouterr().out
    assert out == f"{HEADER}\n- apple\n- grape\n"


def test_cli_single_dash_flags(tmp_path: Path, capsys):
    d = _dict(tmp_path, ["slate", "crony", "glyph"])
    assert main(["-dictionary", d, "-invalid", "a,s"]) == 0
    assert capsys.readouterr().out.splitlines() == [HEADER, "- crony", "- glyph"]


def test_cli_zero_matches_is_success(tmp_path: Path, capsys):
    d = _dict(tmp_path, ["crate", "trace", "react"])
    assert main(["--dictionary", d, "--wrong-spot", "1:z"]) == 0
    assert capsys.readouterr().out == f"{HEADER}\n"


def test_cli_malformed_clause(tmp_path: Path, capsys):
    d = _dict(tmp_path, ["apple"])
    assert main(["--dictionary", d, "--correct-spot", "1e"]) == 1
    cap = capsys.readouterr()
    assert cap.out == ""
    assert "usage:" in cap.err and "Error:" in cap.err


def test_cli_invalid_position(tmp_path: Path, capsys):
    d = _dict(tmp_path, ["apple"])
    assert main(["--dictionary", d, "--wrong-spot", "x:e"]) == 1
    cap = capsys.readouterr()
    assert cap.out == ""
    assert "Error: Invalid position x" in cap.err


def test_cli_missing_dictionary_file(tmp_path: Path, capsys):
    assert main(["--dictionary", str(tmp_path / "nope.txt")]) == 1
    cap = capsys.readouterr()
    assert cap.out == "" and "does not exist" in cap.err


def test_cli_unreadable_mid_stream_prints_nothing(tmp_path: Path, capsys):
    p = tmp_path / "words.txt"
    p.write_bytes(b"apple\ngrape\n\xff\n")
    assert main(["--dictionary", str(p)]) == 1
    assert capsys.readouterr().out == ""


def test_cli_dictionary_is_required(capsys):
    with pytest.raises(SystemExit) as ei:
        main([])
    assert ei.value.code == 2


def test_cli_summary_and_plain_progress_go_to_stderr(tmp_path: Path, capsys):
    d = _dict(tmp_path, ["apple", "", "grape"])
    assert main(["--dictionary", d, "--summary", "--progress", "plain"]) == 0
    cap = capsys.readouterr()
    assert cap.out.splitlines() == [HEADER, "- apple", "- grape"]
    assert "words=2" in cap.err and "[3 words]" in cap.err


def test_config_from_args_defaults():
    args = build_parser().parse_args(["--dictionary", "w.txt"])
    cfg = GuessConfig.from_args(args)
    assert cfg == GuessConfig(dictionary="w.txt")


def test_cli_progress_bar_goes_to_stderr(tmp_path: Path, capsys):
    d = _dict(tmp_path, ["apple", "mango", "grape"])
    assert main(["--dictionary", d, "--correct-spot", "5:e", "--progress", "bar"]) == 0
    cap = capsys.readouterr()
    assert cap.out.splitlines() == [HEADER, "- apple", "- grape"]
    assert "Scanning" in cap.err and "word" in cap.err


def test_cli_progress_auto_is_off_without_tty(tmp_path: Path, capsys):
    d = _dict(tmp_path, ["apple", "mango", "grape"])
    assert main(["--dictionary", d, "--correct-spot", "5:e", "--progress", "auto"]) == 0
    cap = capsys.readouterr()
    assert cap.out.splitlines() == [HEADER, "- apple", "- grape"]
    assert cap.err == ""


def test_cli_plain_progress_line_is_terminated_on_read_error(tmp_path: Path, capsys):
    p = tmp_path / "words.txt"
    p.write_bytes(b"apple\n\xff\n")
    assert main(["--dictionary", str(p), "--progress", "plain"]) == 1
    cap = capsys.readouterr()
    assert cap.out == ""
    assert "s\nError: " in cap.err
