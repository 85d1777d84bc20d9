"""
AeroFS API client layer.

Provides HTTP communication with the AeroFS API.
"""

from aerofs.api.http_client import HttpClient, sanitize_for_log

__all__ = ["HttpClient", "sanitize_for_log"]
