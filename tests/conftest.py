"""
Pytest configuration and fixtures for test isolation.
"""
import os

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def isolate_tests(tmp_path, monkeypatch):
    """
    Automatically isolate each test by:
    1. Pointing HOME at a temporary directory so no user config is read
    2. Removing CODE_BUNDLER_* variables from the environment
    """
    home = tmp_path / "home"
    home.mkdir(exist_ok=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))

    for name in list(os.environ):
        if name.startswith("CODE_BUNDLER_"):
            monkeypatch.delenv(name)

    yield


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """Empty working directory the bundler runs in."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def csharp_project(project_dir):
    """Working directory with two C# files."""
    (project_dir / "a.cs").write_text("int x=1;\n\nint y=2;\n", encoding="utf-8")
    (project_dir / "b.cs").write_text("// hi\n", encoding="utf-8")
    return project_dir


@pytest.fixture
def runner():
    return CliRunner()
