"""Loader for the bundled weather dataset."""

from pathlib import Path

from id3_tlbx.exceptions import TableLoadError
from id3_tlbx.utils.paths import get_dataset_path

from .base_dataset import BaseDataset
from .weather_columns import WeatherColumn as Col


class WeatherDataset(BaseDataset):
    """The 14-row weather dataset used throughout the ID3 literature.

    **Example workflow**:
    >>> from id3_tlbx.data import WeatherDataset
    >>> ds = WeatherDataset.from_csv()
    >>> res = ds.make_id3_learner().fit().result()
    >>> print(res.tree.to_text())
    >>> ds.evaluate(res.tree).accuracy
    1.0
    """

    Col = Col

    @classmethod
    def from_csv(cls, *, csv_path: str | Path | None = None) -> "WeatherDataset":
        """Load the weather dataset.

        Args:
            csv_path: Path to the CSV file (defaults to the bundled copy)

        Returns:
            WeatherDataset instance

        Raises:
            TableLoadError: If the file lacks a weather column or has a value outside its categories
        """
        csv_path = get_dataset_path("weather") if csv_path is None else Path(csv_path)
        df = cls.read_csv(csv_path)

        missing = [str(col) for col in Col if str(col) not in df.columns]
        if missing:
            raise TableLoadError(f"Weather columns {missing} not found in '{csv_path}'.")

        for col in Col:
            unexpected = col.unexpected_values(df[str(col)])
            if unexpected:
                raise TableLoadError(
                    f"Column '{col}' in '{csv_path}' has values {unexpected}; expected one of {list(col.categories)}.",
                )

        return cls(df=df.loc[:, [*Col.attribute_columns(), str(Col.TARGET)]])
