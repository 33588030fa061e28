"""MAC address vendor lookup against an IEEE OUI reference table."""

__version__ = "1.0.0"
