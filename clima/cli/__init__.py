"""Command-line entry point and configuration."""
