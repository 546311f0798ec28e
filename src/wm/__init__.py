"""wm - working-memory log system."""

__version__ = "0.2.0"
