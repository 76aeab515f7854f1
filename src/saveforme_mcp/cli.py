"""Setup CLI: manage drives and bind projects to them.

Usage:
    saveforme drive add media --provider do --region nyc3 --access-key-id KEY --bucket my-space
    saveforme drive list
    saveforme local media
    saveforme init
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from .config import ConfigStore, ProjectConfig, StorageConfig, ValidationError
from .constants import LOCAL_CONFIG_DIRNAME, project_dir
from .formatting import format_as_table
from .storage import StorageClient, detect_provider

logger = logging.getLogger(__name__)

PROVIDERS = ("aws", "do", "custom")


def build_storage_config(
    provider: str,
    *,
    region: Optional[str],
    access_key_id: str,
    secret_access_key: str,
    bucket: str,
    endpoint: Optional[str] = None,
    path_style: bool = True,
) -> StorageConfig:
    """Drive profile for a provider preset.

    AWS and DigitalOcean endpoints are derived from the region and use
    virtual-host addressing; custom endpoints keep the path-style choice.
    """
    if provider == "aws":
        return StorageConfig(
            endpoint="https://s3.amazonaws.com",
            region=region or "us-east-1",
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            bucket_name=bucket,
            force_path_style=False,
        )
    if provider == "do":
        do_region = region or "nyc3"
        return StorageConfig(
            endpoint=f"https://{do_region}.digitaloceanspaces.com",
            region=do_region,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            bucket_name=bucket,
            force_path_style=False,
        )
    if provider == "custom":
        if not endpoint:
            raise ValueError("--endpoint is required for custom providers")
        return StorageConfig(
            endpoint=endpoint,
            region=region or "us-east-1",
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            bucket_name=bucket,
            force_path_style=path_style,
        )
    raise ValueError(f"Unknown provider '{provider}' (expected one of: {', '.join(PROVIDERS)})")


def check_connection(config: StorageConfig) -> Optional[str]:
    """List the bucket once; return the error message on failure."""
    try:
        StorageClient(config).list_files()
    except Exception as e:
        return str(e)
    return None


def cmd_drive_add(args: argparse.Namespace, store: ConfigStore) -> int:
    secret = args.secret_access_key or os.environ.get("SAVEFORME_SECRET_ACCESS_KEY", "")
    try:
        config = build_storage_config(
            args.provider,
            region=args.region,
            access_key_id=args.access_key_id,
            secret_access_key=secret,
            bucket=args.bucket,
            endpoint=args.endpoint,
            path_style=not args.no_path_style,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        config.validate_or_raise()
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not args.skip_check:
        print("Testing connection...")
        failure = check_connection(config)
        if failure is None:
            print("Connection successful!")
        elif args.force:
            print(f"Connection failed: {failure} (saving anyway)", file=sys.stderr)
        else:
            print(f"Connection failed: {failure}", file=sys.stderr)
            print("Re-run with --force to save the drive anyway.", file=sys.stderr)
            return 1

    updated = store.upsert_drive(args.name, config, make_default=not args.no_default)
    print(f"Global configuration saved for drive \"{args.name}\"")
    if updated.default_drive == args.name:
        print(f"\"{args.name}\" is the default drive")
    return 0


def cmd_drive_list(args: argparse.Namespace, store: ConfigStore) -> int:
    global_config = store.load_global()
    if global_config is None or not global_config.drives:
        print("No drives configured yet.")
        return 0

    rows = [
        {
            "drive": name,
            "default": "yes" if name == global_config.default_drive else "",
            "provider": detect_provider(drive.endpoint),
            "endpoint": drive.endpoint,
            "bucket": drive.bucket_name,
            "region": drive.region,
        }
        for name, drive in global_config.drives.items()
    ]
    print(format_as_table(rows))

    local = store.load_local()
    if local is not None:
        print(f"\nCurrent project uses: {local.drive_name}")
    return 0


def cmd_local(args: argparse.Namespace, store: ConfigStore) -> int:
    drives = store.list_drive_names()
    if not drives:
        print("No drives configured. Please add a drive first (saveforme drive add).", file=sys.stderr)
        return 1

    drive = store.get_drive(args.drive)
    if drive is None:
        print(f"Drive configuration not found: {args.drive} (available: {', '.join(drives)})", file=sys.stderr)
        return 1

    project_name = args.project_name or project_dir().name or "project"
    store.save_local(ProjectConfig(drive_name=args.drive, project_directory=project_name, s3_config=drive))
    print(f"Local configuration saved for project \"{project_name}\"")
    print(f"Using drive \"{args.drive}\"")
    return 0


def cmd_init(args: argparse.Namespace, store: ConfigStore) -> int:
    claude_dir = project_dir() / LOCAL_CONFIG_DIRNAME
    if not claude_dir.exists():
        claude_dir.mkdir(parents=True)
        print(f"Created {LOCAL_CONFIG_DIRNAME} directory")

    print('Run "saveforme drive add" and "saveforme local" to configure your storage.')
    print("Add this to your MCP client settings:\n")
    snippet = {"mcpServers": {"saveformedearai": {"command": "saveforme-mcp", "args": []}}}
    print(json.dumps(snippet, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="saveforme",
        description="Configure SaveForMe drives (S3-compatible storage profiles)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    drive = subparsers.add_parser("drive", help="Manage global drive profiles")
    drive_sub = drive.add_subparsers(dest="drive_command", required=True)

    add = drive_sub.add_parser("add", help="Add or replace a drive")
    add.add_argument("name", help="Drive name (identifier for this S3 configuration)")
    add.add_argument("--provider", choices=PROVIDERS, default="custom")
    add.add_argument("--endpoint", help="S3 endpoint URL (custom providers only)")
    add.add_argument("--region", help="Region (aws default: us-east-1, do default: nyc3)")
    add.add_argument("--access-key-id", required=True)
    add.add_argument(
        "--secret-access-key",
        help="Secret key (defaults to SAVEFORME_SECRET_ACCESS_KEY)",
    )
    add.add_argument("--bucket", required=True, help="Bucket (or Space) name")
    add.add_argument("--no-path-style", action="store_true", help="Use virtual-host addressing (custom only)")
    add.add_argument("--no-default", action="store_true", help="Do not make this the default drive")
    add.add_argument("--skip-check", action="store_true", help="Skip the connection test")
    add.add_argument("--force", action="store_true", help="Save even if the connection test fails")
    add.set_defaults(handler=cmd_drive_add)

    list_cmd = drive_sub.add_parser("list", help="List configured drives")
    list_cmd.set_defaults(handler=cmd_drive_list)

    local = subparsers.add_parser("local", help="Use a drive for the current project")
    local.add_argument("drive", help="Name of a configured drive")
    local.add_argument("--project-name", help="Project label (defaults to the directory name)")
    local.set_defaults(handler=cmd_local)

    init = subparsers.add_parser("init", help="Prepare the current directory")
    init.set_defaults(handler=cmd_init)

    return parser


def main(argv: Optional[Sequence[str]] = None, store: Optional[ConfigStore] = None) -> int:
    load_dotenv()
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.WARNING), stream=sys.stderr)

    args = build_parser().parse_args(argv)
    return args.handler(args, store or ConfigStore.from_environment())


if __name__ == "__main__":
    sys.exit(main())
