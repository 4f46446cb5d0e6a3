"""Post-build artifact publisher for Connect endpoints."""

__version__ = "0.1.0"
