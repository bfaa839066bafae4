import sys
import pytest
from json2sheet.cli.runtime import run_cli
from json2sheet.errors import InputNotFoundError

# ---------------------------------------------------------------------
# Fake mains for exercising the wrapper
# ---------------------------------------------------------------------
def main_ok(argv=None) -> int:
    """simulates successful run of main"""
    return 0

def main_fail(argv=None) -> int:
    """simulates regular failure code of main"""
    return 5

def main_exception(argv=None) -> int:
    """simulates uncaught exception in main"""
    raise ValueError("kaputt")

def main_missing_input(argv=None) -> int:
    """simulates a conversion error raised by the core"""
    raise InputNotFoundError("JSON file not found: nope.json", path="nope.json")

# ---------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------
def test_run_cli_ok(capsys):
    """main() successful -> exit code 0, no error message"""
    with pytest.raises(SystemExit) as e:
        run_cli(main_ok, argv=[])
    assert e.value.code == 0
    out, err = capsys.readouterr()
    assert out == ""
    assert err == ""


def test_run_cli_fail(capsys):
    """main() returns 5 -> exit code 5"""
    with pytest.raises(SystemExit) as e:
        run_cli(main_fail, argv=[])
    assert e.value.code == 5
    out, err = capsys.readouterr()
    assert "Error" not in err


def test_run_cli_reads_sys_argv(monkeypatch):
    """no explicit argv -> sys.argv[1:] is passed on"""
    seen = {}

    def main_capture(argv=None) -> int:
        seen["argv"] = argv
        return 0

    monkeypatch.setattr(sys, "argv", ["prog", "in.json", "out.xlsx"])
    with pytest.raises(SystemExit):
        run_cli(main_capture)
    assert seen["argv"] == ["in.json", "out.xlsx"]


def test_run_cli_exception_short(monkeypatch, capsys):
    """Exception without --debug or -vv -> short error message"""
    monkeypatch.setattr(sys, "argv", ["prog"])
    with pytest.raises(SystemExit) as e:
        run_cli(main_exception)
    assert e.value.code == 1
    out, err = capsys.readouterr()
    assert "Error: kaputt" in err
    assert "Traceback" not in err


def test_run_cli_exception_debug(capsys):
    """Exception with --debug -> full Traceback"""
    with pytest.raises(SystemExit) as e:
        run_cli(main_exception, argv=["--debug"])
    assert e.value.code == 1
    out, err = capsys.readouterr()
    assert "Traceback" in err
    assert "ValueError: kaputt" in err


def test_run_cli_exception_verbose(capsys):
    """Exception with -v -v -> full Traceback"""
    with pytest.raises(SystemExit) as e:
        run_cli(main_exception, argv=["-v", "-v"])
    assert e.value.code == 1
    out, err = capsys.readouterr()
    assert "Traceback" in err


def test_run_cli_conversion_error_is_one_line(capsys):
    """core error -> single 'Error: ...' line, exit 1"""
    with pytest.raises(SystemExit) as e:
        run_cli(main_missing_input, argv=["nope.json", "out.xlsx"])
    assert e.value.code == 1
    out, err = capsys.readouterr()
    assert err.strip() == "Error: JSON file not found: nope.json"


def test_run_cli_conversion_error_debug_keeps_message(capsys):
    """core error with --debug -> traceback plus the error line"""
    with pytest.raises(SystemExit):
        run_cli(main_missing_input, argv=["--debug"])
    out, err = capsys.readouterr()
    assert "Traceback" in err
    assert "Error: JSON file not found" in err
