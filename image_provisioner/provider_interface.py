from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from google.cloud import compute_v1


class IImageClient(ABC):
    @abstractmethod
    def get_license(self, license_name: str) -> str:
        """Resolve a license short name to its self link"""
        ...

    @abstractmethod
    def delete_image(self, image_name: str) -> compute_v1.Operation:
        ...

    @abstractmethod
    def insert_image(self, image: compute_v1.Image) -> compute_v1.Operation:
        ...

    @abstractmethod
    def get_global_operation(self, operation_name: str) -> compute_v1.Operation:
        ...

    @abstractmethod
    def list_image_pages(self, filter: Optional[str] = None) -> Iterator[List[compute_v1.Image]]:
        """Yield images one server page at a time, fetching lazily"""
        ...
