"""Implementations of the performer CLI commands."""
