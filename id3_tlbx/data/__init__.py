"""Data module for dataset classes and table views."""

from .csv_dataset import CsvDataset
from .views import BaseView, DropView, SelectView, TableView, find_column
from .weather_columns import WeatherColumn as WCol
from .weather_dataset import WeatherDataset


__all__ = [
    "BaseView",
    "CsvDataset",
    "DropView",
    "SelectView",
    "TableView",
    "WCol",
    "WeatherDataset",
    "find_column",
]
