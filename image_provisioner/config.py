from pydantic import BaseModel
from typing import List, Optional
import tomllib

from .types import GuestOsFeatureMode, ImageSpec


class GcpConfig(BaseModel):
    # Empty means GcpClient.load_from_env picks the project and key file
    project: str = ""
    json_key_file: Optional[str] = None
    poll_interval_seconds: float = 10
    poll_timeout_seconds: float = 1200


class ImageRequestConfig(BaseModel):
    source_image: str
    family: str
    name: str
    description: str = ""
    licenses: List[str] = []
    # TODO: drop once every supported release ships the multi-queue driver
    disable_scsi_multiqueue: bool = False

    def to_spec(self) -> ImageSpec:
        features = GuestOsFeatureMode.NONE if self.disable_scsi_multiqueue else GuestOsFeatureMode.VIRTIO_SCSI_MULTIQUEUE
        return ImageSpec(
            source_image=self.source_image,
            family=self.family,
            name=self.name,
            description=self.description,
            licenses=tuple(self.licenses),
            guest_os_features=features,
        )


class ProvisionConfig(BaseModel):
    gcp: GcpConfig = GcpConfig()
    image: Optional[ImageRequestConfig] = None



def load_config(config_file: str) -> ProvisionConfig:
    with open(config_file, "rb") as f:
        data = tomllib.load(f)
    return ProvisionConfig(**data)
