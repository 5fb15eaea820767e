"""Dataset for arbitrary categorical CSV files."""

from pathlib import Path

from id3_tlbx.exceptions import TableLoadError

from .base_dataset import BaseDataset


class CsvDataset(BaseDataset):
    """Any CSV file whose first row names the columns.

    Example:
        >>> ds = CsvDataset.from_csv("mushrooms.csv", class_column="edible")
        >>> res = ds.make_id3_learner().fit().result()
        >>> print(res.tree.to_text())
    """

    @classmethod
    def from_csv(cls, csv_path: str | Path, class_column: str) -> "CsvDataset":
        """Load a CSV file as a table of strings.

        Args:
            csv_path: Path to the CSV file
            class_column: Name of the target column

        Returns:
            CsvDataset instance

        Raises:
            TableLoadError: If the file is malformed or lacks ``class_column``
        """
        df = cls.read_csv(csv_path)
        if class_column not in df.columns:
            raise TableLoadError(
                f"Class column '{class_column}' not found in '{csv_path}'. Available: {df.columns.to_list()}",
            )
        return cls(df=df, class_column=class_column)
