"""Location adapters - Implementations of DeviceLocatorPort.

Available implementations:
- StaticDeviceLocator: Coordinates from configuration
"""

from .static_locator import StaticDeviceLocator

__all__ = ["StaticDeviceLocator"]
