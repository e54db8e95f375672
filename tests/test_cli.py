import io

from solong.cli import main
from solong.errors import ErrorCode

CORRIDOR = "1111111\n1P0C0E1\n1111111\n"


def write_map(tmp_path, text, name="level.ber"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_wrong_argument_count(capsys):
    assert main([]) == ErrorCode.BAD_ARG
    assert "Error" in capsys.readouterr().err


def test_bad_extension(tmp_path):
    path = write_map(tmp_path, CORRIDOR, name="level.txt")
    assert main([path.replace(str(tmp_path), "x")]) == ErrorCode.EXTENSION_ERROR


def test_missing_file(tmp_path):
    missing = str(tmp_path / "missing.ber").replace(str(tmp_path), "nowhere")
    assert main([missing]) == ErrorCode.NOFILE_ERROR


def test_invalid_map_reports_code(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_map(tmp_path, "1111\n1P01\n1111\n")
    assert main(["level.ber"]) == ErrorCode.ELEMENT_ERROR


def test_play_to_win(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    write_map(tmp_path, CORRIDOR)
    monkeypatch.setattr("sys.stdin", io.StringIO("d\nd\nd d\n"))
    assert main(["level.ber"]) == 0
    out = capsys.readouterr().out
    assert "Yummy!" in out
    assert "YASS, 20 hours of sleep straight" in out
    assert "Moves: 4" in out


def test_escape_stops_play(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    write_map(tmp_path, CORRIDOR)
    monkeypatch.setattr("sys.stdin", io.StringIO("escape\nd\n"))
    assert main(["level.ber"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("1111111\n1P0C0E1\n")
    assert "Moves" not in out