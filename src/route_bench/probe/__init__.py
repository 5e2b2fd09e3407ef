"""Probe execution and output parsing."""
