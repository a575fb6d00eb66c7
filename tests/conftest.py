import textwrap

import pytest


@pytest.fixture
def write_input(tmp_path):
    """Write a puzzle input to a temp file and return its path as a string."""
    def _write(text, name="input.txt"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(text).lstrip("\n"), encoding="utf-8")
        return str(path)
    return _write
