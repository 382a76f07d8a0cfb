"""Prime Time: a line-delimited JSON primality service over TCP."""

__version__ = '0.1.0'
