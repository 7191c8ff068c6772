"""CPU scheduling simulator: round-robin and priority round-robin schedulers."""

__version__ = "0.1.0"

__all__ = ["task", "tasklist", "cpu", "schedulers", "driver"]