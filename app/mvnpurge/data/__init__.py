"""Bundled data files for mvnpurge."""
