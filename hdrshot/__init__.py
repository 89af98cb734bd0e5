"""HDR screenshot processing: config, tone mapping, pixel conversion, PNG and DIB output."""

__version__ = "0.1.0"