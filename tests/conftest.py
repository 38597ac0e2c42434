"""Pytest fixtures and test utilities."""
import tempfile
from pathlib import Path

import pytest

from instabl.resolver import PackageResolver


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def gopath(temp_dir):
    """Create an empty GOPATH workspace with a src folder."""
    workspace = temp_dir / "go"
    (workspace / "src").mkdir(parents=True)
    return workspace


@pytest.fixture
def resolver(gopath):
    """Create a PackageResolver for the test workspace."""
    return PackageResolver(str(gopath))


@pytest.fixture
def write_go():
    """Return a helper writing a Go source file below a folder."""
    def _write(root: Path, rel_path: str, source: str) -> Path:
        file_path = root / rel_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(source)
        return file_path

    return _write


@pytest.fixture
def sample_go_repo(gopath, write_go):
    """
    Create a sample Go repository at <GOPATH>/src/example.com/proj.

    Creates a repository with:
    - package a: no imports
    - package b: imports a (local) and fmt (external)
    """
    repo_path = gopath / "src" / "example.com" / "proj"

    write_go(repo_path, "a/a.go", """package a

func A() int { return 1 }
""")

    write_go(repo_path, "b/b.go", """package b

import (
\t"fmt"

\t"example.com/proj/a"
)

func B() { fmt.Println(a.A()) }
""")

    yield repo_path
