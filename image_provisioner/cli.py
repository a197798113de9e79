"""
Command Line Interface for the GCE image provisioner

Provides commands for:
- create: Create an image from a raw disk, optionally replacing an existing one
- list: List images in the project
"""

import argparse
import sys
import threading
from typing import Optional

from dotenv import load_dotenv
from google.api_core.exceptions import GoogleAPICallError
from google.auth.exceptions import GoogleAuthError
from loguru import logger

from .config import ProvisionConfig, load_config
from .errors import ImageProvisionError
from .gcp_provider import GcpClient
from .image_builder import ImageApi
from .logger import configure_logger


def get_image_api(config: ProvisionConfig) -> ImageApi:
    if config.gcp.project:
        client = GcpClient(project=config.gcp.project, json_key_file=config.gcp.json_key_file)
    else:
        try:
            client = GcpClient.load_from_env()
        except KeyError:
            raise ImageProvisionError("No GCE project configured, set [gcp].project or GCE_PROJECT")
        if config.gcp.json_key_file:
            client.json_key_file = config.gcp.json_key_file

    return ImageApi(client, poll_interval=config.gcp.poll_interval_seconds, poll_timeout=config.gcp.poll_timeout_seconds)


def _load(config_file: Optional[str]) -> ProvisionConfig:
    if config_file is None:
        return ProvisionConfig()
    return load_config(config_file)


# === Create Command ===

def create_command(args) -> int:
    config = _load(args.config)
    if config.image is None:
        logger.error(f"No [image] table in {args.config}")
        return 1

    spec = config.image.to_spec()
    api = get_image_api(config)

    op, pending = api.create_image(spec, overwrite=args.overwrite)
    logger.info(f"Image {spec.name} insert submitted as operation {op.name}")

    if args.no_wait:
        return 0

    pending.wait()
    logger.success(f"Image {spec.name} created")
    return 0


# === List Command ===

def list_command(args) -> int:
    config = _load(args.config)
    api = get_image_api(config)

    cancel = threading.Event()
    result = {}

    def _list():
        try:
            result["images"] = api.list_images(args.prefix, cancel=cancel)
        except Exception as e:
            result["error"] = e

    worker = threading.Thread(target=_list, daemon=True)
    worker.start()
    try:
        while worker.is_alive():
            worker.join(0.2)
    except KeyboardInterrupt:
        logger.warning("Interrupted, cancelling image listing")
        cancel.set()
        worker.join()

    if "error" in result:
        raise result["error"]

    for image in result["images"]:
        print(f"{image.name}\t{image.family}\t{image.status}\t{image.creation_timestamp}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gce-image", description="Create and list GCE images")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create an image from a raw disk")
    create.add_argument("-c", "--config", type=str, required=True, help="TOML file with [gcp] and [image] tables")
    create.add_argument("--overwrite", action="store_true", help="Delete an existing image with the same name first")
    create.add_argument("--no-wait", action="store_true", help="Return once the insert is submitted")
    create.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    create.set_defaults(func=create_command)

    list_parser = subparsers.add_parser("list", help="List images in the project")
    list_parser.add_argument("-c", "--config", type=str, default=None, help="TOML file with a [gcp] table")
    list_parser.add_argument("-p", "--prefix", type=str, default="", help="Only list images whose name starts with this")
    list_parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    list_parser.set_defaults(func=list_command)

    return parser


def main(argv=None) -> int:
    load_dotenv()

    args = build_parser().parse_args(argv)
    configure_logger(args.verbose)

    try:
        return args.func(args)
    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e.filename}")
        return 1
    except (ImageProvisionError, GoogleAPICallError, GoogleAuthError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
