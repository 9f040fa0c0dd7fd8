"""Use cases for managing devices."""

from .register_device import get_device, register_device

__all__ = ["get_device", "register_device"]
