"""City weather lookup service backed by Open-Meteo."""

__version__ = "0.1.0"
