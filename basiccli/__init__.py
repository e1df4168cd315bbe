"""BasicCli: greeting, version, benchmark and JSON processing commands."""

__version__ = "1.0.0"
