from .logging_config import configure_logging
from .paths import get_data_dir, get_dataset_path
from .plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


__all__ = [
    "DEFAULT_PLOT_CFG",
    "PlottingConfig",
    "configure_logging",
    "get_data_dir",
    "get_dataset_path",
]
