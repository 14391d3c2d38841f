"""keepipe: JMA temperature forecast to WiFiDigit display."""

__version__ = "0.1.0"
