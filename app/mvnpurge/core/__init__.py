"""Core configuration, paths and theming for mvnpurge."""
