"""SDK scanners for dver."""

from dver.scanners.base import SdkScanner, sorted_versions, version_sort_key
from dver.scanners.dotnet import DotnetScanner, parse_sdk_line, parse_sdk_list

__all__ = [
    "DotnetScanner",
    "SdkScanner",
    "parse_sdk_line",
    "parse_sdk_list",
    "sorted_versions",
    "version_sort_key",
]
