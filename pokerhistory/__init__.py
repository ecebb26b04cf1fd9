"""Open Hand History models, JSON reading and writing, and simulated ICM payouts."""

__version__ = "4.0.0"
__all__ = ["dates", "enums", "icm", "models", "writer"]