"""Command-line interface for ngffmeta."""

from __future__ import annotations

import argparse
import sys

import ngffmeta
from ngffmeta import NGFFValidationError, from_uri, v04


def _print_header(title: str) -> None:
    """Print a formatted header."""
    print(f"\n{'=' * 60}")
    print(f" {title}")
    print(f"{'=' * 60}")


def _print_section(title: str) -> None:
    """Print a section header."""
    print(f"\n{title}")
    print("-" * len(title))


def _print_result(success: bool, message: str, indent: int = 0) -> None:
    """Print a validation result with appropriate formatting."""
    prefix = "  " * indent
    if success:
        print(f"{prefix}✓ {message}")
    else:
        print(f"{prefix}✗ {message}")


def _print_summary(attrs: v04.OMEAttributes) -> None:
    if attrs.multiscales is not None:
        print(f"Number of multiscales: {len(attrs.multiscales)}")
        for i, ms in enumerate(attrs.multiscales):
            if ms.name:
                print(f"  Multiscale {i}: {ms.name}")
            axis_names = [ax.name for ax in ms.axes]
            print(f"    Axes: {', '.join(axis_names)}")
            print(f"    Resolution levels: {len(ms.datasets)}")
    elif attrs.plate is not None:
        plate = attrs.plate
        print(
            f"Plate dimensions: {len(plate.rows)} rows x "
            f"{len(plate.columns)} columns"
        )
        print(f"Number of wells: {len(plate.wells)}")
        if plate.acquisitions:
            print(f"Number of acquisitions: {len(plate.acquisitions)}")
        if plate.name:
            print(f"Plate name: {plate.name}")
    elif attrs.well is not None:
        print(f"Number of fields: {len(attrs.well.images)}")
    elif attrs.labels is not None:
        print(f"Number of label images: {len(attrs.labels)}")
        for label in attrs.labels:
            print(f"  - {label}")


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info subcommand."""
    _print_header("OME-ZARR Metadata Information")
    print(f"URI: {args.uri}")

    try:
        attrs = from_uri(args.uri)
    except Exception as e:
        print(f"\nError: {e}")
        return 1

    _print_section("Basic Information")
    print(f"OME Type: {attrs.kind}")
    is_local = not args.uri.startswith(("http://", "https://", "s3://", "gs://"))
    print(f"Location: {'Local' if is_local else 'Remote'}")

    _print_section("Metadata Summary")
    _print_summary(attrs)
    print()
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate subcommand."""
    _print_header("OME-ZARR Metadata Validation")
    print(f"URI: {args.uri}")

    _print_section("Schema Validation")
    try:
        attrs = from_uri(args.uri)
    except Exception as e:
        _print_result(False, f"Failed to load metadata: {e}")
        return 1
    _print_result(True, f"Successfully loaded {attrs.kind} metadata")

    _print_section("Consistency Validation")
    try:
        if args.acquisitions is not None and attrs.well is not None:
            v04.validate_well(attrs.well, set(args.acquisitions))
        v04.validate_ome_attributes(attrs)
    except NGFFValidationError as e:
        _print_result(False, f"Consistency validation failed ({e.type})")
        for line in str(e).splitlines():
            print(f"    {line}")
        return 1
    _print_result(True, "Metadata is internally consistent")

    _print_section("Summary")
    _print_result(True, "Validation completed successfully")
    print()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="ngffmeta",
        description="OME-NGFF v0.4 metadata validation and inspection tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ngffmeta info /path/to/image.zarr
  ngffmeta validate https://example.com/plate.zarr
  ngffmeta validate /path/to/plate.zarr/A/1 --acquisitions 1 2
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"ngffmeta {ngffmeta.__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    info_parser = subparsers.add_parser(
        "info", help="Show information about an OME-ZARR group"
    )
    info_parser.add_argument(
        "uri", help="URI to the OME-ZARR group or its .zattrs (local path or URL)"
    )

    validate_parser = subparsers.add_parser(
        "validate", help="Validate the metadata of an OME-ZARR group"
    )
    validate_parser.add_argument(
        "uri", help="URI to the OME-ZARR group or its .zattrs (local path or URL)"
    )
    validate_parser.add_argument(
        "--acquisitions",
        nargs="*",
        type=int,
        metavar="ID",
        help="Acquisition ids of the parent plate, to check a well against",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == "info":
            return cmd_info(args)
        elif args.command == "validate":
            return cmd_validate(args)
        else:
            print(f"Unknown command: {args.command}")
            return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
