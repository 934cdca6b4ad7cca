"""mvnpurge - purge failed-download markers from a local Maven repository."""

__version__ = "0.1.0"
