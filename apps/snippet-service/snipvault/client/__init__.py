"""Client-side API access and presentation state for the snippet dashboard."""

from .api_client import ClientConfig, SnippetApiClient
from .dashboard import DashboardController, DashboardStatus, InvalidTransition, SnippetCard
from .composer import SnippetComposer

__all__ = [
    "ClientConfig",
    "SnippetApiClient",
    "DashboardController",
    "DashboardStatus",
    "InvalidTransition",
    "SnippetCard",
    "SnippetComposer",
]
