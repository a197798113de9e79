from pathlib import Path

import pytest
from pydantic import ValidationError

from image_provisioner.config import ProvisionConfig, load_config
from image_provisioner.types import GuestOsFeatureMode

CONFIG_TOML = """
[gcp]
project = "coreos-cloud"
poll_interval_seconds = 2

[image]
source_image = "gs://builds/coreos_production_gce.tar.gz"
family = "coreos-alpha"
name = "coreos-alpha-1451-0-0-v20170626"
licenses = ["coreos-alpha"]
"""


def _write(tmp_path: Path, text: str) -> str:
    path = tmp_path / "image_config.toml"
    path.write_text(text)
    return str(path)


def test_load_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.toml"))


def test_load_config_parses_tables(tmp_path: Path):
    cfg = load_config(_write(tmp_path, CONFIG_TOML))

    assert cfg.gcp.project == "coreos-cloud"
    assert cfg.gcp.poll_interval_seconds == 2
    assert cfg.gcp.poll_timeout_seconds == 1200
    assert cfg.gcp.json_key_file is None
    assert cfg.image is not None
    assert cfg.image.description == ""


def test_to_spec_defaults_to_multiqueue(tmp_path: Path):
    spec = load_config(_write(tmp_path, CONFIG_TOML)).image.to_spec()

    assert spec.name == "coreos-alpha-1451-0-0-v20170626"
    assert spec.licenses == ("coreos-alpha",)
    assert spec.guest_os_features is GuestOsFeatureMode.VIRTIO_SCSI_MULTIQUEUE


def test_to_spec_maps_disabled_multiqueue(tmp_path: Path):
    text = CONFIG_TOML + "disable_scsi_multiqueue = true\n"

    spec = load_config(_write(tmp_path, text)).image.to_spec()

    assert spec.guest_os_features is GuestOsFeatureMode.NONE


def test_image_table_requires_name(tmp_path: Path):
    text = CONFIG_TOML.replace('name = "coreos-alpha-1451-0-0-v20170626"\n', "")

    with pytest.raises(ValidationError):
        load_config(_write(tmp_path, text))



def test_empty_config_leaves_project_to_environment():
    cfg = ProvisionConfig()

    assert cfg.gcp.project == ""
    assert cfg.image is None
