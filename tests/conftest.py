"""
Shared test fixtures and sample documents for iniscan tests.

Sample INI documents are module-level constants so tests across unit and
integration suites parse exactly the same bytes.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample documents
# ---------------------------------------------------------------------------
SERVER_INI = "[server]\nhost = localhost\nport = 8080\n"

MIXED_INI = """\
; global settings
name = demo
debug = true

[database]
host = db.internal
  port = 5432

; credentials follow
[database.auth]
user = admin
"""

CRLF_INI = "[app]\r\nmode = fast\r\nlevel = 3\r\n"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def write_ini(tmp_path: Path):
    """Write text (or bytes) to an .ini file under tmp_path and return its path."""

    def _write(content, name: str = "test.ini") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at an empty directory so no global config leaks into a test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home
