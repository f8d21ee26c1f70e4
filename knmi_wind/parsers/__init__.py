from .station_table import StationTableParser

__all__ = [
    'StationTableParser',
]
