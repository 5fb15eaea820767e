"""Column definitions for the weather ("play tennis") dataset."""

from .base_columns import BaseColumn, ColumnMetadata


class WeatherColumn(BaseColumn):
    """Column names for the classic 14-row weather dataset (Quinlan, 1986).

    Columns:
    - ``outlook``: str - sunny / overcast / rain
    - ``temperature``: str - hot / mild / cool
    - ``humidity``: str - high / normal
    - ``wind``: str - weak / strong
    - ``play``: str - yes / no (target variable)
    """

    # Target variable
    TARGET = "play"
    """Whether the game was played (target variable)."""
    PLAY = TARGET

    OUTLOOK = "outlook"
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    WIND = "wind"

    def metadata(self) -> ColumnMetadata:
        return _COLUMN_METADATA_WEATHER[self]


_COLUMN_METADATA_WEATHER: dict[WeatherColumn, ColumnMetadata] = {
    WeatherColumn.TARGET: ColumnMetadata(
        pretty_name="Play",
        categories=("yes", "no"),
    ),
    WeatherColumn.OUTLOOK: ColumnMetadata(
        pretty_name="Outlook",
        categories=("sunny", "overcast", "rain"),
    ),
    WeatherColumn.TEMPERATURE: ColumnMetadata(
        pretty_name="Temperature",
        categories=("hot", "mild", "cool"),
    ),
    WeatherColumn.HUMIDITY: ColumnMetadata(
        pretty_name="Humidity",
        categories=("high", "normal"),
    ),
    WeatherColumn.WIND: ColumnMetadata(
        pretty_name="Wind",
        categories=("weak", "strong"),
    ),
}
