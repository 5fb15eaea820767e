from .analysis import Decision, ID3Learner, classify, learn
from .data import CsvDataset, WeatherDataset
from .data.views import BaseView, TableView


__all__ = [
    "BaseView",
    "CsvDataset",
    "Decision",
    "ID3Learner",
    "TableView",
    "WeatherDataset",
    "classify",
    "learn",
]
