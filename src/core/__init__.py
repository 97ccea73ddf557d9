"""Core configuration and shared utilities."""

from dotenv import load_dotenv

from .config import Settings, get_settings
from .errors import BrokenLinkError, ContentRootError, DocsiteError, MalformedFrontMatterError

load_dotenv()

__all__ = [
    "BrokenLinkError",
    "ContentRootError",
    "DocsiteError",
    "MalformedFrontMatterError",
    "Settings",
    "get_settings",
]
