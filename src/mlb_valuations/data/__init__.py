from mlb_valuations.data.csv_source import CsvPlayerSource

__all__ = ["CsvPlayerSource"]
