import shutil
import subprocess
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from caro_build.utils import Logger

SENTINELS = (
    "external/Vulkan-Headers/CMakeLists.txt",
    "external/Vulkan-Hpp/CMakeLists.txt",
)


class FakeRun:
    """Stands in for subprocess.run and records every command"""

    def __init__(self):
        self.calls = []
        self.failures = []
        self.hooks = []

    def fail_when(self, predicate, returncode=1):
        self.failures.append((predicate, returncode))

    def on_call(self, hook):
        self.hooks.append(hook)

    def commands_for(self, tool):
        return [c for c in self.calls if Path(c[0]).name.startswith(tool)]

    def __call__(self, cmd, cwd=None, env=None, check=False, capture_output=False, text=False, **kwargs):
        cmd = [str(c) for c in cmd]
        self.calls.append(cmd)
        for hook in self.hooks:
            hook(cmd)

        returncode = 0
        for predicate, code in self.failures:
            if predicate(cmd):
                returncode = code
                break

        if returncode == 0 and Path(cmd[0]).name == "cmake" and "--build" in cmd:
            build_dir = Path(cmd[cmd.index("--build") + 1])
            build_dir.mkdir(parents=True, exist_ok=True)
            (build_dir / "compile_commands.json").write_text("[]")
            (build_dir / "caro").write_text("")

        if returncode and check:
            raise subprocess.CalledProcessError(returncode, cmd)
        return subprocess.CompletedProcess(cmd, returncode, "", "")


@pytest.fixture
def fake_run(monkeypatch):
    runner = FakeRun()
    monkeypatch.setattr(subprocess, "run", runner)
    return runner


@pytest.fixture
def available_tools(monkeypatch):
    """Set of tool names shutil.which should resolve"""
    tools = {"cmake", "git"}

    def fake_which(name, mode=None, path=None):
        return f"/usr/bin/{name}" if name in tools else None

    monkeypatch.setattr(shutil, "which", fake_which)
    return tools


@pytest.fixture
def project(tmp_path):
    """A minimal project tree with submodules already checked out"""
    root = tmp_path / "caro"
    (root / "src" / "renderer").mkdir(parents=True)
    (root / "src" / "main.cpp").write_text("int main() {}\n")
    (root / "src" / "renderer" / "device.cpp").write_text("")
    (root / "src" / "renderer" / "device.hpp").write_text("")
    (root / "src" / "renderer" / "shader.h").write_text("")
    (root / "src" / "renderer" / "notes.txt").write_text("")
    (root / "CMakeLists.txt").write_text("project(caro)\n")
    for sentinel in SENTINELS:
        path = root / sentinel
        path.parent.mkdir(parents=True)
        path.write_text("")
    return root


class _CurrentStdout:
    """Resolves sys.stdout on every access so capsys sees the output"""

    def __getattr__(self, name):
        return getattr(sys.stdout, name)


@pytest.fixture
def logger(capsys):
    return Logger(verbose=True, stream=_CurrentStdout())
