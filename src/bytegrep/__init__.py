"""bytegrep: find byte sequences in files and show them as a hexdump."""

__version__ = "0.1.0"
