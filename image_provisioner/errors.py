"""
Image Provisioning Errors

Every failure raised by this package derives from ImageProvisionError.
Errors from the insert call itself are not wrapped and surface as
GoogleAPICallError or, for credential and transport failures, GoogleAuthError.
"""

from typing import List, Optional


class ImageProvisionError(Exception):
    """Base class for image provisioning failures"""


class InvalidLicenseError(ImageProvisionError):
    """A license short name could not be resolved"""

    def __init__(self, license_name: str, cause: Exception):
        self.license_name = license_name
        self.cause = cause
        super().__init__(f"Invalid GCE license {license_name}: {cause}")


class ImageDeleteError(ImageProvisionError):
    """Deleting the existing image failed for a reason other than not-found"""

    def __init__(self, image_name: str, cause: Exception):
        self.image_name = image_name
        self.cause = cause
        super().__init__(f"deleting image {image_name}: {cause}")


class OperationError(ImageProvisionError):
    """A long-running operation finished with errors"""

    def __init__(self, operation_name: str, errors: Optional[List[str]] = None):
        self.operation_name = operation_name
        self.errors = errors or []
        super().__init__(f"Operation {operation_name!r} failed: {'; '.join(self.errors)}")


class OperationTimeoutError(ImageProvisionError):
    """A long-running operation did not finish in time"""

    def __init__(self, operation_name: str, timeout: float):
        self.operation_name = operation_name
        self.timeout = timeout
        super().__init__(f"Timed out after {timeout:.0f}s waiting for operation {operation_name!r}")


class ImageListError(ImageProvisionError):
    """Listing images failed"""


class ListCancelledError(ImageListError):
    """Listing images was cancelled by the caller"""
