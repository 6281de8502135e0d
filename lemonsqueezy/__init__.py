"""Client for the Lemon Squeezy API: services, JSON:API models and webhook helpers."""

__version__ = "0.1.0"