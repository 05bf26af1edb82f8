from datetime import date
from pathlib import Path
from typing import List

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"


def read_holiday_file(path: Path) -> List[date]:
    """Dates of a ``year/month/day | description`` fixture; ``#`` starts a comment."""
    dates = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        year, month, day = (int(token) for token in line.split("|", 1)[0].split("/"))
        dates.append(date(year, month, day))
    return dates


@pytest.fixture
def holiday_file():
    def load(name: str) -> List[date]:
        return read_holiday_file(DATA_DIR / name)

    return load
