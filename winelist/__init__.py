"""Digital wine list for Gran Caffè L'Aquila."""

__version__ = "0.1.0"
