"""Shared fixtures for RoadAnalysis tests."""

import pytest

WORD_LIST = """\
| Stop words used by the tests
и      | and
в      | in
не  на
     | blank line with only a comment

что
""".encode("utf-8")


@pytest.fixture
def word_list_bytes():
    return WORD_LIST


@pytest.fixture
def word_list_file(tmp_path):
    path = tmp_path / "stop.txt"
    path.write_bytes(WORD_LIST)
    return path
