"""Tests for the metatrace entry point"""

import pytest

from metatrace import __main__ as module_main
from metatrace.main import EXIT_HELP, EXIT_INTERNAL_ERROR, EXIT_OK, EXIT_USAGE_ERROR, main


def test_success_reports_configuration(capsys):
    code = main(["metatrace", "-t", "meta.trace", "-n", "2", "-r"])

    captured = capsys.readouterr()
    assert code == EXIT_OK
    assert "\ttrace: meta.trace," in captured.out
    assert "\tnum_out_files: 2," in captured.out
    assert "\trandomize: true," in captured.out
    assert "\trange: 0%-100%," in captured.out


def test_help_exit_status(capsys):
    code = main(["metatrace", "--help"])

    captured = capsys.readouterr()
    assert code == EXIT_HELP
    assert "Processing meta trace files" in captured.err
    assert captured.out == ""


@pytest.mark.parametrize(
    "argv,message",
    [
        (["metatrace"], "Missing argument for -t/--trace"),
        (["metatrace", "-t"], "Missing argument for -t"),
        (["metatrace", "-t", "a", "-e", "x"], "Invalid number for -e: 'x'"),
        (["metatrace", "what"], "Unknown argument: what"),
    ],
)
def test_usage_error_exit_status(capsys, argv, message):
    code = main(argv)

    captured = capsys.readouterr()
    assert code == EXIT_USAGE_ERROR
    assert message in captured.err
    assert captured.out == ""


def test_help_and_errors_are_distinguishable():
    assert len({EXIT_OK, EXIT_HELP, EXIT_USAGE_ERROR, EXIT_INTERNAL_ERROR}) == 4
    assert EXIT_HELP != 0 and EXIT_USAGE_ERROR != 0


def test_unexpected_error_is_logged(monkeypatch, capsys):
    def boom(self, argv=None):
        raise RuntimeError("broken")

    monkeypatch.setattr("metatrace.main.ArgumentParser.parse", boom)

    code = main(["metatrace", "-t", "a"])

    assert code == EXIT_INTERNAL_ERROR
    assert "Critical error: broken" in capsys.readouterr().err


def test_debug_logging(capsys):
    main(["metatrace", "-t", "a", "-s", "5"], log_level="debug")

    err = capsys.readouterr().err
    assert "DEBUG: Option -s/--start = 5" in err
    assert "DEBUG: Resolved configuration: {'trace_path': 'a'" in err
    assert "'start': 5" in err


def test_module_entry_point(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["metatrace", "-t", "from-argv"])

    assert module_main.main() == EXIT_OK
    assert "trace: from-argv" in capsys.readouterr().out


def test_package_metadata():
    import metatrace

    assert metatrace.__version__ == "0.1.0"
    assert metatrace.__author__ == "metatrace contributors"
