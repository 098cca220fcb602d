"""Serve an Outline collection as a public wiki."""

from outline_site.api import OutlineApi
from outline_site.config import Settings, load_settings
from outline_site.core.icons import classify_icon
from outline_site.core.links import rewrite_links
from outline_site.core.tree.path_index import build_path_index
from outline_site.protocols import ApiProtocol

__all__ = [
    "ApiProtocol",
    "OutlineApi",
    "Settings",
    "build_path_index",
    "classify_icon",
    "load_settings",
    "rewrite_links",
]
