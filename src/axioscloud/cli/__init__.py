"""Command line interface for axioscloud."""
