"""
HTTP adapters for YooKassa SDK.
"""

from .adapter import HTTPAdapter, HTTPResponse
from .requests_adapter import RequestsAdapter

__all__ = ["HTTPAdapter", "HTTPResponse", "RequestsAdapter"]
