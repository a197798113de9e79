"""
Image Type Definitions
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple

from google.cloud import compute_v1


class GuestOsFeatureMode(str, Enum):
    """Guest OS feature set attached to a created image"""
    VIRTIO_SCSI_MULTIQUEUE = "virtio-scsi-multiqueue"
    NONE = "none"

    def features(self) -> List[compute_v1.GuestOsFeature]:
        if self is GuestOsFeatureMode.NONE:
            return []
        return [compute_v1.GuestOsFeature(type_="VIRTIO_SCSI_MULTIQUEUE")]


@dataclass(frozen=True)
class ImageSpec:
    """Declarative description of an image to create"""
    # Raw disk location, e.g. gs://bucket/disk.tar.gz
    source_image: str
    family: str
    name: str
    description: str = ""
    # License short names, resolved to self links before use
    licenses: Tuple[str, ...] = field(default_factory=tuple)
    guest_os_features: GuestOsFeatureMode = GuestOsFeatureMode.VIRTIO_SCSI_MULTIQUEUE

    @property
    def disable_scsi_multiqueue(self) -> bool:
        return self.guest_os_features is GuestOsFeatureMode.NONE

    def build_image(self, license_links: Sequence[str]) -> compute_v1.Image:
        return compute_v1.Image(
            family=self.family,
            name=self.name,
            description=self.description,
            licenses=list(license_links),
            guest_os_features=self.guest_os_features.features(),
            raw_disk=compute_v1.RawDisk(source=self.source_image),
        )
