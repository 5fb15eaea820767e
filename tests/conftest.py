"""Test configuration for the ID3 toolbox."""

from pathlib import Path
import sys

import matplotlib
import pytest


matplotlib.use("Agg")

# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


WEATHER_ROWS = [
    ["outlook", "temperature", "humidity", "wind", "play"],
    ["sunny", "hot", "high", "weak", "no"],
    ["sunny", "hot", "high", "strong", "no"],
    ["overcast", "hot", "high", "weak", "yes"],
    ["rain", "mild", "high", "weak", "yes"],
    ["rain", "cool", "normal", "weak", "yes"],
    ["rain", "cool", "normal", "strong", "no"],
    ["overcast", "cool", "normal", "strong", "yes"],
    ["sunny", "mild", "high", "weak", "no"],
    ["sunny", "cool", "normal", "weak", "yes"],
    ["rain", "mild", "normal", "weak", "yes"],
    ["sunny", "mild", "normal", "strong", "yes"],
    ["overcast", "mild", "high", "strong", "yes"],
    ["overcast", "hot", "normal", "weak", "yes"],
    ["rain", "mild", "high", "strong", "no"],
]


@pytest.fixture
def weather_rows() -> list[list[str]]:
    """Weather table as CSV-reader rows, header first."""
    return [list(row) for row in WEATHER_ROWS]


@pytest.fixture
def weather_view(weather_rows):
    """Fresh base view over the weather table."""
    from id3_tlbx.data.views import BaseView

    return BaseView.from_rows(weather_rows)


@pytest.fixture(scope="session")
def weather_dataset():
    """Load the bundled weather dataset once per test session."""
    from id3_tlbx.data import WeatherDataset

    return WeatherDataset.from_csv()


@pytest.fixture
def weather_csv(tmp_path: Path) -> Path:
    """Weather table written to a temporary CSV file."""
    path = tmp_path / "weather.csv"
    path.write_text("\n".join(",".join(row) for row in WEATHER_ROWS) + "\n", encoding="utf-8")
    return path
