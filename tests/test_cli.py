"""Tests for the command-line driver.

Covers:
- In-place rewrite with .bak backup, --no-backup, unchanged files left alone
- --check reporting without writing
- Error reporting, continuing past failures, --fail-fast
- stdin to stdout
- Flag translation into FormatOptions
"""

from __future__ import annotations

import io
import os
import stat
from pathlib import Path

import pytest

from jsclean import FormatOptions
from jsclean.cli import build_parser, main, options_from_args

_MESSY = "var a = 1, b = 2\n"
_CLEAN = "var a = 1;\nvar b = 2;\n"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def _options(*argv: str) -> FormatOptions:
    return options_from_args(build_parser().parse_args(list(argv)))


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestRewrite:
    def test_formats_in_place(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, "a.js", _MESSY)
        assert main([str(path)]) == 0
        assert path.read_text(encoding="utf-8") == _CLEAN
        assert capsys.readouterr().out == f"{path}\n"

    def test_backup_holds_original(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "a.js", _MESSY)
        main([str(path)])
        assert (tmp_path / "a.js.bak").read_text(encoding="utf-8") == _MESSY

    def test_existing_backup_replaced(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "a.js", _MESSY)
        _write(tmp_path, "a.js.bak", "stale")
        main([str(path)])
        assert (tmp_path / "a.js.bak").read_text(encoding="utf-8") == _MESSY

    @pytest.mark.parametrize("flag", ["-n", "--no-backup"])
    def test_no_backup(self, tmp_path: Path, flag: str) -> None:
        path = _write(tmp_path, "a.js", _MESSY)
        assert main([flag, str(path)]) == 0
        assert path.read_text(encoding="utf-8") == _CLEAN
        assert not (tmp_path / "a.js.bak").exists()

    def test_unchanged_file_untouched(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, "a.js", _CLEAN)
        mtime = path.stat().st_mtime_ns
        assert main([str(path)]) == 0
        assert path.stat().st_mtime_ns == mtime
        assert not (tmp_path / "a.js.bak").exists()
        assert capsys.readouterr().out == ""

    def test_no_temporary_files_left(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "a.js", _MESSY)
        main([str(path)])
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.js", "a.js.bak"]

    def test_mode_preserved(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "run.js", "#!/usr/bin/env node\n" + _MESSY)
        path.chmod(0o755)
        main([str(path)])
        assert stat.S_IMODE(path.stat().st_mode) == 0o755

    def test_utf8_content(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "a.js", "x = \"caf\xe9\"\n")
        main([str(path)])
        assert path.read_bytes() == b"x = 'caf\\xe9';\n"

    def test_several_files(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        one = _write(tmp_path, "one.js", _MESSY)
        two = _write(tmp_path, "two.js", _CLEAN)
        three = _write(tmp_path, "three.js", "a == b")
        assert main([str(one), str(two), str(three)]) == 0
        assert capsys.readouterr().out.splitlines() == [str(one), str(three)]


class TestCheck:
    def test_reports_without_writing(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, "a.js", _MESSY)
        assert main(["--check", str(path)]) == 1
        assert path.read_text(encoding="utf-8") == _MESSY
        assert not (tmp_path / "a.js.bak").exists()
        assert capsys.readouterr().out == f"{path}\n"

    def test_clean_passes(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "a.js", _CLEAN)
        assert main(["--check", str(path)]) == 0


class TestErrors:
    def test_syntax_error_reported(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, "bad.js", "a = 1;\nb = ;\n")
        assert main([str(path)]) == 1
        err = capsys.readouterr().err
        assert err.startswith(f"{path}: line 2, column ")
        assert path.read_text(encoding="utf-8") == "a = 1;\nb = ;\n"

    def test_continues_after_failure(self, tmp_path: Path) -> None:
        bad = _write(tmp_path, "bad.js", "function (")
        good = _write(tmp_path, "good.js", _MESSY)
        assert main([str(bad), str(good)]) == 1
        assert good.read_text(encoding="utf-8") == _CLEAN

    def test_fail_fast(self, tmp_path: Path) -> None:
        bad = _write(tmp_path, "bad.js", "function (")
        good = _write(tmp_path, "good.js", _MESSY)
        assert main(["--fail-fast", str(bad), str(good)]) == 1
        assert good.read_text(encoding="utf-8") == _MESSY

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        missing = tmp_path / "missing.js"
        assert main([str(missing)]) == 1
        assert capsys.readouterr().err.startswith(f"{missing}: ")

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.js"
        path.write_bytes(b"x = '\xe9';\n")
        assert main([str(path)]) == 1

    def test_unsupported_syntax(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, "view.js", "x = <div />;\n")
        assert main([str(path)]) == 1
        assert "jsx" in capsys.readouterr().err

    def test_too_deep_reported_and_batch_continues(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        deep = _write(tmp_path, "deep.js", "x = " + "(" * 3000 + "a" + ")" * 3000 + "\n")
        good = _write(tmp_path, "good.js", _MESSY)
        assert main([str(deep), str(good)]) == 1
        assert capsys.readouterr().err.startswith(f"{deep}: input is nested too deeply")
        assert good.read_text(encoding="utf-8") == _CLEAN

    def test_long_chain_formats(self, tmp_path: Path) -> None:
        chain = "x = " + " + ".join(["a"] * 800)
        path = _write(tmp_path, "chain.js", chain + "\n")
        assert main(["-n", str(path)]) == 0
        assert path.read_text(encoding="utf-8") == chain + ";\n"


# ---------------------------------------------------------------------------
# stdin
# ---------------------------------------------------------------------------


class TestStdin:
    def test_formats_to_stdout(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("a == b"))
        assert main([]) == 0
        assert capsys.readouterr().out == "a === b;\n"

    def test_options_apply(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("if (a) b()"))
        assert main(["--spaces", "2", "--no-semicolons"]) == 0
        assert capsys.readouterr().out == "if (a) {\n  b()\n}\n"

    def test_error(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("function ("))
        assert main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("<stdin>: ")

    def test_undecodable_input(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        stdin = io.TextIOWrapper(io.BytesIO(b"x = '\xe9';\n"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)
        assert main([]) == 1
        assert capsys.readouterr().err.startswith("<stdin>: ")

    def test_too_deep(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("x = " + "[" * 3000 + "]" * 3000))
        assert main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("<stdin>: input is nested too deeply")


# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------


class TestArguments:
    def test_defaults(self) -> None:
        assert _options() == FormatOptions()

    @pytest.mark.parametrize(
        ("flag", "field"),
        [
            ("--no-cap-comments", "cap_comments"),
            ("--no-exact-equals", "exact_equals"),
            ("--no-extra-braces", "extra_braces"),
            ("--no-semicolons", "semicolons"),
            ("--no-separate-vars", "separate_vars"),
            ("--no-sort-cases", "sort_cases"),
            ("--no-sort-functions", "sort_functions"),
            ("--no-sort-properties", "sort_properties"),
            ("--no-trailing-break", "trailing_break"),
        ],
    )
    def test_rule_flags(self, flag: str, field: str) -> None:
        assert getattr(_options(flag), field) is False

    def test_strip_braces_implies_no_extra(self) -> None:
        options = _options("--strip-braces")
        assert options.strip_braces is True
        assert options.extra_braces is False

    @pytest.mark.parametrize("argv", [["-s", "4"], ["--spaces", "4"], ["--spaces=4"]])
    def test_spaces(self, argv: list[str]) -> None:
        assert _options(*argv).indent == "    "

    @pytest.mark.parametrize("value", ["0", "-2", "two"])
    def test_bad_spaces(self, value: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--spaces", value])
        assert exc_info.value.code == 2

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out == "jsclean 0.1.0\n"

    def test_files_are_paths(self) -> None:
        args = build_parser().parse_args(["a.js", "b.js"])
        assert args.files == [Path("a.js"), Path("b.js")]

    def test_verbose_logs_timing(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = _write(tmp_path, "a.js", _MESSY)
        with caplog.at_level("DEBUG", logger="jsclean.cli"):
            main(["-v", str(path)])
        assert any(r.getMessage().startswith(f"formatted {path} in ") for r in caplog.records)


def test_strip_braces_end_to_end(tmp_path: Path) -> None:
    path = _write(tmp_path, "a.js", "if (a) { b() }\n")
    assert main(["--strip-braces", "-n", str(path)]) == 0
    assert path.read_text(encoding="utf-8") == "if (a)\n\tb();\n"
    assert os.listdir(tmp_path) == ["a.js"]
