import subprocess
import sys

import pytest

from helpers import index_of
from strcomplex.index.int_vector import store_packed_int_vector
from strcomplex.index.lcp import build_lcp
from strcomplex.main import main, parse_args


def result_fields(line: str) -> dict:
    head, *pairs = line.split()
    assert head == "RESULT"
    return dict(pair.split("=", 1) for pair in pairs)


def test_single_symbol_line(write_file, capsys):
    path = write_file(b"a")
    assert main([path]) == 0
    out = capsys.readouterr().out
    assert out == f"RESULT file={path} n=1 sigma=1 h0=0.000000 r=1 z78=1 z77=1 delta=1.000000\n"


def test_two_symbols_line(write_file, capsys):
    path = write_file(b"ab")
    assert main([path]) == 0
    out = capsys.readouterr().out
    assert out == f"RESULT file={path} n=2 sigma=2 h0=1.000000 r=1 z78=2 z77=2 delta=2.000000\n"


def test_field_order(write_file, capsys):
    assert main([write_file(b"mississippi")]) == 0
    fields = result_fields(capsys.readouterr().out)
    assert list(fields) == ["file", "n", "sigma", "h0", "r", "z78", "z77", "delta"]
    assert fields["n"] == "11"
    assert fields["sigma"] == "4"
    assert fields["z78"] == "8"
    assert fields["z77"] == "8"


def test_progress_goes_to_stderr(write_file, capsys):
    assert main([write_file(b"banana")]) == 0
    captured = capsys.readouterr()
    assert captured.out.count("\n") == 1
    assert "computing SA ..." in captured.err
    assert "computing LCP and delta ..." in captured.err


def test_quiet(write_file, capsys):
    assert main(["-q", write_file(b"banana")]) == 0
    assert capsys.readouterr().err == ""


def test_memory_report(write_file, capsys):
    assert main(["--memory", write_file(b"banana")]) == 0
    assert "peak memory" in capsys.readouterr().err


def test_prefix_argument(write_file, capsys):
    assert main([write_file(b"abcdefgh"), "3"]) == 0
    fields = result_fields(capsys.readouterr().out)
    assert fields["n"] == "3"
    assert fields["z77"] == "3"


def test_zero_prefix_reads_everything(write_file, capsys):
    assert main([write_file(b"abcdefgh"), "0"]) == 0
    assert result_fields(capsys.readouterr().out)["n"] == "8"


def test_precomputed_arrays(write_file, tmp_path, capsys):
    content = b"banana"
    text, sa, _ = index_of(content)
    sa_path = store_packed_int_vector(str(tmp_path / "banana.sa"), sa)
    lcp_path = store_packed_int_vector(str(tmp_path / "banana.lcp"), build_lcp(text.getBytes(), sa))
    path = write_file(content)

    assert main([path]) == 0
    computed = capsys.readouterr()
    assert main([path, "0", sa_path, lcp_path]) == 0
    loaded = capsys.readouterr()
    assert loaded.out == computed.out
    assert "loading SA ..." in loaded.err
    assert "loading LCP and delta ..." in loaded.err


@pytest.mark.parametrize("argv", [[], ["file.txt", "many"], ["file.txt", "-3"], ["file.txt", "--bogus"]])
def test_usage_errors(argv, capsys):
    assert main(argv) == -1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("usage: ")
    assert captured.err.count("\n") == 1


def test_zero_byte(write_file, capsys):
    assert main([write_file(b"ab\x00ab")]) == -2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "must not contain any zero bytes" in captured.err


def test_bad_suffix_array(write_file, tmp_path, capsys):
    bad = store_packed_int_vector(str(tmp_path / "bad.sa"), [0, 1])
    assert main([write_file(b"banana"), "0", bad]) == -3
    assert capsys.readouterr().out == ""


def test_missing_input_is_fatal(tmp_path):
    with pytest.raises(OSError):
        main([str(tmp_path / "missing.txt")])


def test_parse_args_defaults():
    args = parse_args(["input.txt"])
    assert args.file == "input.txt"
    assert args.prefix == 0
    assert args.sa_path is None and args.lcp_path is None
    assert args.lz77_strategy == "stack"
    assert not args.memory and not args.quiet


@pytest.mark.skipif(sys.platform == "win32", reason="exit status wraps differently")
def test_process_exit_status(write_file):
    completed = subprocess.run(
        [sys.executable, "-m", "strcomplex.main", "-q", write_file(b"ab\x00ab")],
        capture_output=True, text=True)
    assert completed.returncode == 254
    assert completed.stdout == ""

    completed = subprocess.run(
        [sys.executable, "-m", "strcomplex.main", "-q", write_file(b"abab")],
        capture_output=True, text=True)
    assert completed.returncode == 0
    assert completed.stdout.startswith("RESULT ")
