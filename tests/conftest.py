import pytest

HILL = """\
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""


@pytest.fixture
def hill_text():
    return HILL


@pytest.fixture
def hill_file(tmp_path, hill_text):
    p = tmp_path / "hill.txt"
    p.write_text(hill_text)
    return p
