import io
import sys

import pytest

import hexcat
import hexwriter

hello = b"Hello, World!\n\nMore text"


@pytest.fixture
def hello_file(tmp_path):
    path = tmp_path / "Hello.txt"
    path.write_bytes(hello)
    return path


def test_dump_to_output_file(tmp_path, hello_file):
    out = tmp_path / "dump.txt"
    assert hexcat.main(["-o", str(out), str(hello_file)]) == 0
    assert out.read_text() == hexwriter.hexdump(hello)


def test_dump_to_stdout(capsysbinary, hello_file):
    assert hexcat.main([str(hello_file)]) == 0
    assert capsysbinary.readouterr().out == hexwriter.hexdump(hello).encode('ascii')


def test_dump_stdin(monkeypatch, capsysbinary):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(hello)))
    assert hexcat.main([]) == 0
    assert capsysbinary.readouterr().out == hexwriter.hexdump(hello).encode('ascii')


def test_files_form_one_stream(tmp_path, hello_file):
    out = tmp_path / "dump.txt"
    assert hexcat.main(["-o", str(out), str(hello_file), str(hello_file)]) == 0
    assert out.read_text() == hexwriter.hexdump(hello + hello)
    assert out.read_text().splitlines()[2].startswith("0x00000020: ")


def test_small_chunk_size(tmp_path, hello_file):
    out = tmp_path / "dump.txt"
    assert hexcat.main(["-s", "3", "-o", str(out), str(hello_file)]) == 0
    assert out.read_text() == hexwriter.hexdump(hello)


@pytest.mark.parametrize("size", ["0", "-4", "many"])
def test_bad_chunk_size(capsys, size):
    assert hexcat.main(["-s", size]) == 1
    assert "error:" in capsys.readouterr().out


def test_unknown_option(capsys):
    assert hexcat.main(["-x"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    out = tmp_path / "dump.txt"
    assert hexcat.main(["-o", str(out), str(tmp_path / "nope.bin")]) == 1
    assert "error:" in capsys.readouterr().err
    assert out.read_text() == ""


def test_version(capsys):
    assert hexcat.main(["-v"]) == 1
    assert hexcat.VERSION in capsys.readouterr().out


def test_help(capsys):
    assert hexcat.main(["-?"]) == 1
    assert "Usage:" in capsys.readouterr().out
