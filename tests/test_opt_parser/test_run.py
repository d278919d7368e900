import pytest

from posixopt import OptParser


@pytest.fixture
def parser():
    return (
        OptParser("backup", "Back up a directory", "0.3.0")
        .add_term("source", "STRING", "Directory to back up")
        .add_param(["level", "l"], "INT", "Compression level", default=6)
        .add_flag(["dry-run", "n"], "Do not write anything")
    )


def test_run_success(parser):
    args = parser.run(["data", "-n", "--level=9"])
    assert args.get("source") == "data"
    assert args.get("level") == 9
    assert args.get("dry-run") is True


@pytest.mark.parametrize(
    "argv, exit_code, message",
    [
        (["data", "--bogus"], 2, "error: Unknown option '--bogus'"),
        ([], 2, "error: Option 'source' is required"),
        (["data", "-l", "high"], 1, "error: Invalid integer: high"),
    ],
)
def test_run_errors(parser, capsys, argv, exit_code, message):
    with pytest.raises(SystemExit) as exc_info:
        parser.run(argv)

    assert exc_info.value.code == exit_code
    assert message in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["--help", "--version"])
def test_run_help_and_version_exit_zero(parser, capsys, flag):
    with pytest.raises(SystemExit) as exc_info:
        parser.run([flag])

    assert exc_info.value.code == 0
    assert "backup" in capsys.readouterr().out


def test_run_keyboard_interrupt(parser, capsys, monkeypatch):
    def interrupted(argv=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(parser, "parse", interrupted)
    with pytest.raises(SystemExit) as exc_info:
        parser.run([])

    assert exc_info.value.code == 130
    assert "Operation interrupted" in capsys.readouterr().err
