"""Base analyzer class for all analysis components in the ID3 toolbox."""

from abc import ABC, abstractmethod
from typing import Any


class BaseAnalyser(ABC):
    """Abstract base class for analysis components.

    All analyzers must:
    1. Accept a table view in their constructor
    2. Implement fit() to perform the analysis and return self for chaining
    3. Implement result() to return a frozen dataclass with results

    ### Adding a New Analyzer

    **1. Create analyzer class** (in `analysis/my_analyzer.py`):

    ```python
    from dataclasses import dataclass
    from id3_tlbx.data.views import TableView

    @dataclass(frozen=True)
    class MyAnalysisResult:
        '''Results package for MyAnalyzer.'''
        summary: pd.Series

    class MyAnalyzer(BaseAnalyser):
        def __init__(self, view: TableView):
            self._view = view
            self._result = None

        def fit(self) -> "MyAnalyzer":
            # ... computation logic over self._view ...
            return self

        def result(self) -> MyAnalysisResult:
            if self._result is None:
                raise ValueError("Must call fit() before result()")
            return self._result
    ```

    **2. Add a factory method** to `BaseDataset` (see `make_id3_learner`).

    **3. Add plotting helpers** in `plotting/` that accept the `*Result` dataclass
    and return a matplotlib `Figure`.
    """

    @abstractmethod
    def fit(self) -> "BaseAnalyser":
        """Fit the analyzer to the data.

        Returns:
            Self for method chaining.
        """
        ...

    @abstractmethod
    def result(self) -> Any:
        """Return analysis results as a frozen dataclass instance.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        ...
