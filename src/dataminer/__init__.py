"""dataminer: fixed-order file mining pipeline."""

__version__ = "0.1.0"
