# tests/test_cli.py
import logging
import os
from pathlib import Path

import pytest

from sourcebundle import __version__
from sourcebundle.cli import ExitCode, build_parser, main, setup_logging


def _make_file(p: Path, content: str = "x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


def test_parser_defaults():
    args = build_parser().parse_args(["some/dir"])

    assert args.directory == Path("some/dir")
    assert args.output == Path("summary.txt")
    assert args.skip == []
    assert args.extensions is None
    assert args.full_path is False
    assert args.skip_folders == []
    assert args.workers is None
    assert args.encoding == "utf-8"


def test_parser_multi_value_options():
    args = build_parser().parse_args(
        ["d", "-s", ".ico", ".jpg", "-e", ".py", "--skip-folders", "a", "b", "--full-path", "-j", "3"]
    )

    assert args.skip == [".ico", ".jpg"]
    assert args.extensions == [".py"]
    assert args.skip_folders == ["a", "b"]
    assert args.full_path is True
    assert args.workers == 3


@pytest.mark.parametrize("bad", ["0", "-2", "many"])
def test_workers_must_be_positive(bad: str, capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["d", "-j", bad])
    assert excinfo.value.code == 2


def test_version(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_missing_directory_fails_before_scanning(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    output = tmp_path / "summary.txt"

    code = main([str(tmp_path / "nope"), "-o", str(output)])

    assert code == ExitCode.ERROR
    assert "error:" in capsys.readouterr().err
    assert not output.exists()


def test_directory_argument_must_be_a_directory(tmp_path: Path):
    f = tmp_path / "file.py"
    _make_file(f)

    assert main([str(f), "-o", str(tmp_path / "out.txt")]) == ExitCode.ERROR


def test_success_writes_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    root = tmp_path / "proj"
    _make_file(root / "a.py", "x")
    _make_file(root / "node_modules/c.js", "y")
    output = tmp_path / "summary.txt"

    code = main([str(root), "-o", str(output), "--skip-folders", "node_modules", "-q"])

    assert code == ExitCode.SUCCESS
    text = output.read_text(encoding="utf-8")
    assert text == "Path: a.py\n====\nx\n" + "-" * 51 + "\n\n"
    assert "Summary created" in capsys.readouterr().out


def test_no_matching_files_exits_zero_without_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    root = tmp_path / "proj"
    _make_file(root / "logo.ico")
    output = tmp_path / "summary.txt"

    code = main([str(root), "-o", str(output)])

    assert code == ExitCode.SUCCESS
    assert not output.exists()
    assert "No matching files found." in capsys.readouterr().out


def test_extensions_flag_is_honoured(tmp_path: Path):
    root = tmp_path / "proj"
    _make_file(root / "a.py", "py")
    _make_file(root / "b.toml", "toml")
    output = tmp_path / "summary.txt"

    assert main([str(root), "-o", str(output), "-e", ".toml", "-q"]) == ExitCode.SUCCESS

    text = output.read_text(encoding="utf-8")
    assert "Path: b.toml" in text
    assert "Path: a.py" not in text


def test_skip_flag_normalizes_extensions(tmp_path: Path):
    root = tmp_path / "proj"
    _make_file(root / "a.py")
    _make_file(root / "b.js")
    output = tmp_path / "summary.txt"

    assert main([str(root), "-o", str(output), "-s", "JS", "-q"]) == ExitCode.SUCCESS

    text = output.read_text(encoding="utf-8")
    assert "Path: a.py" in text
    assert "Path: b.js" not in text


def test_unwritable_output_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    root = tmp_path / "proj"
    _make_file(root / "a.py")

    code = main([str(root), "-o", str(tmp_path / "missing" / "summary.txt"), "-q"])

    assert code == ExitCode.ERROR
    assert "error:" in capsys.readouterr().err


def test_setup_logging_does_not_stack_handlers():
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.WARNING)

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_unknown_encoding_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    root = tmp_path / "proj"
    _make_file(root / "a.py")
    output = tmp_path / "summary.txt"

    code = main([str(root), "-o", str(output), "--encoding", "no-such-codec", "-q"])

    assert code == ExitCode.ERROR
    assert "Unknown encoding" in capsys.readouterr().err
    assert not output.exists()


def test_unlistable_directory_exits_with_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    root = tmp_path / "proj"
    _make_file(root / "a.py")
    _make_file(root / "locked/secret.py")
    output = tmp_path / "summary.txt"

    real_scandir = os.scandir

    def flaky_scandir(path="."):
        if os.path.basename(os.fspath(path)) == "locked":
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", flaky_scandir)

    code = main([str(root), "-o", str(output), "-q"])

    assert code == ExitCode.ERROR
    assert "locked" in capsys.readouterr().err
    assert not output.exists()
