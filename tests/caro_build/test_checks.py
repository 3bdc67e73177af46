from pathlib import Path

import pytest

from caro_build.checks import FormatCheck, LintCheck
from caro_build.config.models import CheckSection
from caro_build.exceptions import CommandFailedError, ToolNotFoundError
from caro_build.utils import CommandRunner


def _format_config(**overrides):
    values = dict(tool="clang-format", patterns=["*.cpp", "*.h", "*.hpp"], args=["--dry-run", "--Werror"])
    values.update(overrides)
    return CheckSection(**values)


def _make_format_check(project, logger, tool="clang-format-19", **overrides):
    return FormatCheck(
        config=_format_config(**overrides),
        tool=tool,
        root_dir=project,
        source_dir=project / "src",
        runner=CommandRunner(logger, cwd=project),
        logger=logger
    )


def test_collect_files_matches_patterns(project, logger):
    files = _make_format_check(project, logger).collect_files()

    assert files == [
        Path("src/main.cpp"),
        Path("src/renderer/device.cpp"),
        Path("src/renderer/device.hpp"),
        Path("src/renderer/shader.h"),
    ]


def test_format_command(project, logger, fake_run, capsys):
    assert _make_format_check(project, logger).run() is True

    assert fake_run.calls == [[
        "clang-format-19", "--dry-run", "--Werror",
        "src/main.cpp", "src/renderer/device.cpp", "src/renderer/device.hpp", "src/renderer/shader.h",
    ]]
    out = capsys.readouterr().out
    assert "Running clang-format-19 checks..." in out
    assert "Format check passed!" in out


def test_missing_tool_never_invokes(project, logger, fake_run):
    check = _make_format_check(project, logger, tool=None)

    with pytest.raises(ToolNotFoundError, match="Error: clang-format not found"):
        check.run()

    assert fake_run.calls == []


def test_files_are_batched(project, logger, fake_run):
    _make_format_check(project, logger, max_files_per_invocation=3).run()

    assert [len(c) - 3 for c in fake_run.calls] == [3, 1]


def test_failing_batch_stops_the_check(project, logger, fake_run, capsys):
    fake_run.fail_when(lambda cmd: "src/main.cpp" in cmd, returncode=1)

    with pytest.raises(CommandFailedError):
        _make_format_check(project, logger, max_files_per_invocation=1).run()

    assert len(fake_run.calls) == 1
    assert "Format check passed!" not in capsys.readouterr().out


def test_no_matching_files(tmp_path, logger, fake_run):
    (tmp_path / "src").mkdir()

    assert _make_format_check(tmp_path, logger).run() is True
    assert fake_run.calls == []


def test_missing_source_dir(tmp_path, logger, fake_run):
    assert _make_format_check(tmp_path, logger).run() is True
    assert fake_run.calls == []


def test_lint_command(project, logger, fake_run, capsys):
    check = LintCheck(
        config=CheckSection(tool="clang-tidy", patterns=["*.cpp"], args=["--warnings-as-errors=*"]),
        tool="clang-tidy",
        root_dir=project,
        source_dir=project / "src",
        build_dir=project / "build",
        runner=CommandRunner(logger, cwd=project),
        logger=logger
    )

    assert check.run() is True

    assert fake_run.calls == [[
        "clang-tidy", "-p", str(project / "build"), "--warnings-as-errors=*",
        "src/main.cpp", "src/renderer/device.cpp",
    ]]
    assert "Lint check passed!" in capsys.readouterr().out
