import pytest

from caro_build.builders import CMakeBuilder
from caro_build.config.models import BuildSection
from caro_build.exceptions import CommandFailedError, ToolNotFoundError
from caro_build.utils import CommandRunner


def _make_builder(project, logger, dry_run=False, **overrides):
    return CMakeBuilder(
        name="caro",
        root_dir=project,
        build_dir=project / "build",
        build_config=BuildSection(**overrides),
        runner=CommandRunner(logger, cwd=project, dry_run=dry_run),
        logger=logger
    )


def test_configure_command(project, logger, available_tools, fake_run):
    builder = _make_builder(project, logger)

    assert builder.configure("Debug") is True

    assert fake_run.calls == [[
        "/usr/bin/cmake",
        "-S", str(project),
        "-B", str(project / "build"),
        "-DCMAKE_BUILD_TYPE=Debug",
        "-DCMAKE_EXPORT_COMPILE_COMMANDS=ON",
        "-G", "Ninja",
    ]]


def test_configure_extra_args(project, logger, available_tools, fake_run):
    builder = _make_builder(project, logger, cmake_args=["-DCARO_ASAN=ON"], generator="Unix Makefiles")

    builder.configure("Release")

    assert fake_run.calls[0][-3:] == ["-G", "Unix Makefiles", "-DCARO_ASAN=ON"]


def test_build_command(project, logger, available_tools, fake_run):
    builder = _make_builder(project, logger)

    assert builder.build(7) is True

    assert fake_run.calls == [["/usr/bin/cmake", "--build", str(project / "build"), "--parallel", "7"]]


def test_build_failure(project, logger, available_tools, fake_run):
    fake_run.fail_when(lambda cmd: "--build" in cmd, returncode=1)

    with pytest.raises(CommandFailedError):
        _make_builder(project, logger).build(1)


def test_missing_cmake(project, logger, available_tools):
    available_tools.discard("cmake")

    with pytest.raises(ToolNotFoundError, match="cmake not found"):
        _make_builder(project, logger)


def test_clean_missing_directory_is_not_an_error(project, logger, available_tools):
    builder = _make_builder(project, logger)

    assert builder.clean() is True
    assert not (project / "build").exists()


def test_clean_and_prepare(project, logger, available_tools):
    stale = project / "build" / "CMakeCache.txt"
    stale.parent.mkdir()
    stale.write_text("")
    builder = _make_builder(project, logger)

    builder.clean()
    assert not (project / "build").exists()

    builder.prepare()
    assert (project / "build").is_dir()


def test_dry_run_keeps_build_directory(project, logger, available_tools, fake_run):
    (project / "build").mkdir()
    builder = _make_builder(project, logger, dry_run=True)

    builder.clean()
    builder.configure("Release")

    assert (project / "build").exists()
    assert fake_run.calls == []


def test_export_compile_commands(project, logger, available_tools):
    builder = _make_builder(project, logger)

    assert builder.export_compile_commands() is None
    assert not (project / "compile_commands.json").exists()

    (project / "build").mkdir()
    (project / "build" / "compile_commands.json").write_text('[{"file": "src/main.cpp"}]')

    assert builder.export_compile_commands() == project / "compile_commands.json"
    assert (project / "compile_commands.json").read_text() == '[{"file": "src/main.cpp"}]'
