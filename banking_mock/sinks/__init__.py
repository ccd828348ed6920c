"""Output sinks for exporting mock data fixtures."""

from banking_mock.sinks.json_file import JsonFileSink

__all__ = ["JsonFileSink"]
