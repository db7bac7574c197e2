"""Command line tools for WineList."""
