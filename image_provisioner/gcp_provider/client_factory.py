from dataclasses import dataclass, field
import os
from typing import Any, Iterator, List, Optional

from google.cloud import compute_v1
from google.oauth2 import service_account

from .image import delete_image, get_license_self_link, insert_image, iter_image_pages

from ..provider_interface import IImageClient

COMPUTE_SCOPE = "https://www.googleapis.com/auth/compute"


@dataclass
class GcpClient(IImageClient):
    project: str
    json_key_file: Optional[str] = None

    _images: Optional[compute_v1.ImagesClient] = field(default=None, init=False, repr=False)
    _licenses: Optional[compute_v1.LicensesClient] = field(default=None, init=False, repr=False)
    _operations: Optional[compute_v1.GlobalOperationsClient] = field(default=None, init=False, repr=False)

    @classmethod
    def load_from_env(cls) -> 'GcpClient':
        project = os.environ.get("GCE_PROJECT") or os.environ["GOOGLE_CLOUD_PROJECT"]
        json_key_file = os.environ.get("GCE_JSON_KEY_FILE") or None
        return GcpClient(project=project, json_key_file=json_key_file)

    def credentials(self) -> Any:
        # None lets the compute clients use application default credentials
        if self.json_key_file is None:
            return None
        return service_account.Credentials.from_service_account_file(self.json_key_file, scopes=[COMPUTE_SCOPE])

    @property
    def images(self) -> compute_v1.ImagesClient:
        if self._images is None:
            self._images = compute_v1.ImagesClient(credentials=self.credentials())
        return self._images

    @property
    def licenses(self) -> compute_v1.LicensesClient:
        if self._licenses is None:
            self._licenses = compute_v1.LicensesClient(credentials=self.credentials())
        return self._licenses

    @property
    def operations(self) -> compute_v1.GlobalOperationsClient:
        if self._operations is None:
            self._operations = compute_v1.GlobalOperationsClient(credentials=self.credentials())
        return self._operations

    def get_license(self, license_name: str) -> str:
        return get_license_self_link(self.licenses, self.project, license_name)

    def delete_image(self, image_name: str) -> compute_v1.Operation:
        return delete_image(self.images, self.project, image_name)

    def insert_image(self, image: compute_v1.Image) -> compute_v1.Operation:
        return insert_image(self.images, self.project, image)

    def get_global_operation(self, operation_name: str) -> compute_v1.Operation:
        return self.operations.get(project=self.project, operation=operation_name)

    def list_image_pages(self, filter: Optional[str] = None) -> Iterator[List[compute_v1.Image]]:
        return iter_image_pages(self.images, self.project, filter)
