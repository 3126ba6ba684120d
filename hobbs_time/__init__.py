"""Extract recording windows (Hobbs time) from flight-data-logger CSV exports."""

from hobbs_time.extractor import FlightTimeRecord, extract, extract_path

__version__ = "0.1.0"

__all__ = ["FlightTimeRecord", "extract", "extract_path", "__version__"]
