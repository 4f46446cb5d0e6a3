"""Ambient settings and logging configuration."""
