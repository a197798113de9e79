"""Image creation and listing on GCE"""

import threading
from typing import List, Optional, Tuple

from google.api_core.exceptions import GoogleAPICallError, NotFound
from google.auth.exceptions import GoogleAuthError
from google.cloud import compute_v1
from loguru import logger

from .errors import ImageDeleteError, ImageListError, InvalidLicenseError, ListCancelledError
from .gcp_provider.image import name_prefix_filter
from .pending import DEFAULT_INTERVAL, DEFAULT_TIMEOUT, Pending
from .provider_interface import IImageClient
from .types import ImageSpec

# Failures raised by the compute client, including credential and transport errors
CLIENT_ERRORS = (GoogleAPICallError, GoogleAuthError)


class ImageApi:
    """Image builder and lister bound to one project client"""

    def __init__(self, client: IImageClient, poll_interval: float = DEFAULT_INTERVAL, poll_timeout: float = DEFAULT_TIMEOUT):
        self.client = client
        self.poll_interval = poll_interval
        self.poll_timeout = poll_timeout

    def new_pending(self, operation_name: str) -> Pending:
        return Pending(
            operation_name,
            lambda: self.client.get_global_operation(operation_name),
            interval=self.poll_interval,
            timeout=self.poll_timeout,
        )

    def create_image(self, spec: ImageSpec, overwrite: bool = False) -> Tuple[compute_v1.Operation, Pending]:
        """
        Create an image and return the insert operation with a Pending for it.

        Args:
            spec: Image to create
            overwrite: Delete an existing image with the same name first

        Returns:
            Raw insert operation and a Pending the caller may wait on

        Raises:
            InvalidLicenseError: A license short name did not resolve
            OperationError: Deleting the existing image failed remotely
            ImageDeleteError: The delete call failed with anything but not-found
            GoogleAPICallError: The insert call failed
        """
        licenses = [self._resolve_license(name) for name in spec.licenses]

        if overwrite:
            self._delete_existing(spec.name)

        image = spec.build_image(licenses)

        logger.debug(f"Creating image {spec.name!r} from {spec.source_image!r}")
        op = self.client.insert_image(image)

        return op, self.new_pending(op.name)

    def _resolve_license(self, license_name: str) -> str:
        try:
            return self.client.get_license(license_name)
        except CLIENT_ERRORS as e:
            raise InvalidLicenseError(license_name, e) from e

    def _delete_existing(self, image_name: str):
        logger.debug(f"Overwriting image {image_name!r}")
        op: Optional[compute_v1.Operation] = None
        delete_error: Optional[Exception] = None
        try:
            op = self.client.delete_image(image_name)
        except CLIENT_ERRORS as e:
            delete_error = e

        # An operation handle is waited on before the delete error is looked at
        if op is not None:
            self.new_pending(op.name).wait()

        if delete_error is None or isinstance(delete_error, NotFound):
            return
        raise ImageDeleteError(image_name, delete_error) from delete_error

    def list_images(self, prefix: str = "", cancel: Optional[threading.Event] = None) -> List[compute_v1.Image]:
        """
        List images in the project, optionally only those named with a prefix.

        The cancel event is checked before every page fetch.
        """
        images: List[compute_v1.Image] = []
        try:
            pages = iter(self.client.list_image_pages(name_prefix_filter(prefix)))
            while True:
                if cancel is not None and cancel.is_set():
                    raise ListCancelledError("Listing GCE images cancelled")
                try:
                    page = next(pages)
                except StopIteration:
                    break
                images.extend(page)
        except CLIENT_ERRORS as e:
            raise ImageListError(f"Listing GCE images failed: {e}") from e

        logger.debug(f"Listed {len(images)} images")
        return images
