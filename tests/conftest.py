"""Shared fixtures: small synthetic ColorCET tables."""

import pytest


def _table(rows):
    return "\n".join(",".join(str(c) for c in row) for row in rows) + "\n"


C3_ROWS = [(0, 0, 0), (51, 51, 51), (102, 102, 102), (153, 153, 153), (204, 204, 204)]


@pytest.fixture
def c3_rows():
    """Rows of the Cyclic 3 base table in ``raw_tables``."""
    return list(C3_ROWS)


@pytest.fixture
def raw_tables():
    """Key -> CSV text, keyed the way an asset bundler would."""
    return {
        "CET-C3": _table(C3_ROWS),
        "CET-C3s": _table([(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0)]),
        "CET-CBC1": _table([(10, 20, 30), (40, 50, 60)]),
        "CET-CBL1": _table([(0, 0, 0), (128, 128, 128), (255, 255, 255)]),
        "CET-D01A": _table([(0, 0, 255), (255, 255, 255), (255, 0, 0)]),
        "CET-I3": _table([(100, 150, 200), (200, 150, 100)]),
        "CET-L03": _table([(0, 0, 0), (255, 0, 0), (255, 255, 255)]),
        "CET-R3": _table([(0, 0, 128), (0, 255, 0), (255, 0, 0)]),
    }


@pytest.fixture
def table_dir(tmp_path, raw_tables):
    """Directory of ``CET-*.csv`` files holding ``raw_tables``."""
    for key, text in raw_tables.items():
        (tmp_path / f"{key}.csv").write_text(text, encoding="utf-8")
    return tmp_path
