"""badlogvis: turn badlog telemetry dumps into grouped, derived chart series."""

__version__ = "0.4.0"
