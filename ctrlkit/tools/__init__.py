"""Command line tools for working with ctrlkit parameter files."""
