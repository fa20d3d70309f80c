"""Utility modules."""

from .assets import AssetSource, DirectoryAssetSource, PackageAssetSource
from .logging import setup_logging, get_logger, get_diagnostics_logger
from .validation import (
    validate_input_file,
    validate_text,
    validate_reserved_symbols,
)

__all__ = [
    "AssetSource",
    "DirectoryAssetSource",
    "PackageAssetSource",
    "setup_logging",
    "get_logger",
    "get_diagnostics_logger",
    "validate_input_file",
    "validate_text",
    "validate_reserved_symbols",
]
