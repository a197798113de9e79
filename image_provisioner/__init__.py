"""
GCE Image Provisioner

Creates and lists Compute Engine disk images from declarative specs.
"""

from .errors import (
    ImageProvisionError,
    InvalidLicenseError,
    ImageDeleteError,
    OperationError,
    OperationTimeoutError,
    ImageListError,
    ListCancelledError,
)
from .types import GuestOsFeatureMode, ImageSpec
from .pending import Pending
from .image_builder import ImageApi

__all__ = [
    # Types
    "GuestOsFeatureMode",
    "ImageSpec",
    # Operations
    "ImageApi",
    "Pending",
    # Errors
    "ImageProvisionError",
    "InvalidLicenseError",
    "ImageDeleteError",
    "OperationError",
    "OperationTimeoutError",
    "ImageListError",
    "ListCancelledError",
]
