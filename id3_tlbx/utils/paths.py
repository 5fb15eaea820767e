"""Location of the CSV tables bundled in the repository's ``_data`` directory."""

from pathlib import Path
from typing import Literal


__all__ = ["get_data_dir", "get_dataset_path"]


_DATASET_MAP: dict[str, str] = {
    "weather": "weather.csv",
}

DatasetName = Literal["weather"]


def get_data_dir() -> Path:
    """Return the ``_data`` directory at the repository root."""
    data_dir = (Path(__file__).parents[2] / "_data").resolve()
    assert data_dir.is_dir(), f"Data directory not found at {data_dir}"
    return data_dir


def get_dataset_path(name: DatasetName | str) -> Path:  # noqa: PYI051
    """Resolve a bundled table by short name (``"weather"``) or by file name.

    Raises:
        AssertionError: If no such file exists in :func:`get_data_dir`; the message
            lists the short names that are available.
    """
    ds_path = get_data_dir() / _DATASET_MAP.get(name, name)
    assert ds_path.is_file(), (
        f"Dataset '{name}' not found at {ds_path}. Bundled datasets: {sorted(_DATASET_MAP)}"
    )
    return ds_path
