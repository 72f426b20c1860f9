"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Version information for Zerotrust SDK.

A source checkout reads the VERSION file next to the package; an installed
distribution reports the version recorded in its metadata.
"""

from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "zerotrust-sdk"


def get_version() -> str:
    """
    Resolve the SDK version.

    Returns:
        str: The version string (e.g., "0.1.0"), or "unknown" when neither
        the VERSION file nor distribution metadata is available.
    """
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"


__version__ = get_version()
