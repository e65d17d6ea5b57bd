"""
Fetch module for the interlinear library.

Provides the abstract fetch interface and implementations for HTTP and local files.
"""

from interlinear.fetch.base import BaseFetcher, build_fetch_options
from interlinear.fetch.http import HttpFetcher
from interlinear.fetch.file import FileFetcher

__all__ = [
    "BaseFetcher",
    "build_fetch_options",
    "HttpFetcher",
    "FileFetcher",
]
