"""A minimal packet gateway model: control-plane session state and data-plane packet routing."""

__version__ = "0.1.0"

__all__ = ["bearer", "pdn_connection", "control_plane", "data_plane", "cli"]