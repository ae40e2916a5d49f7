import io

from huffcode.cli import main
from huffcode.decode import decode_string, read_huffman_file


def test_main_round_trip(tmp_path, monkeypatch, capsys):
    out = tmp_path / "saida.huff"
    monkeypatch.setattr("sys.stdin", io.StringIO("hello world\n"))
    status = main(["-o", str(out)])
    assert status == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Original string: hello world" in lines[0]
    assert lines[-1] == "Decoded string: hello world"
    root, encoded = read_huffman_file(out)
    assert decode_string(root, encoded) == b"hello world"


def test_main_prints_encoded_twice_identically(tmp_path, monkeypatch, capsys):
    out = tmp_path / "x.huff"
    monkeypatch.setattr("sys.stdin", io.StringIO("abracadabra"))
    assert main(["--output", str(out)]) == 0
    encoded_lines = [
        line for line in capsys.readouterr().out.splitlines()
        if line.startswith("Encoded string: ")
    ]
    assert len(encoded_lines) == 2
    assert encoded_lines[0] == encoded_lines[1]


def test_main_empty_input_fails(tmp_path, monkeypatch, capsys):
    out = tmp_path / "empty.huff"
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main(["-o", str(out)]) == 1
    assert "Error" in capsys.readouterr().err
    assert not out.exists()


def test_main_unwritable_path_fails(tmp_path, monkeypatch):
    out = tmp_path / "missing_dir" / "out.huff"
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main(["-o", str(out)]) == 1


def test_main_truncates_at_first_newline(tmp_path, monkeypatch, capsys):
    out = tmp_path / "t.huff"
    monkeypatch.setattr("sys.stdin", io.StringIO("first\nsecond\n"))
    assert main(["-o", str(out)]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Decoded string: first"