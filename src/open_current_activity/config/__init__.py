"""Configuration: paths, messages and runtime settings."""
