"""Adapters that turn an external origin into a loaded configuration."""

from lightset.sources.local import load_path, load_resource, load_stream, load_string
from lightset.sources.url import fetch_url_text, load_url

__all__ = ["fetch_url_text", "load_path", "load_resource", "load_stream", "load_string", "load_url"]
