from .dependencies import DependencyService, WingetNotFoundError
from .processor import AppProcessor
from .winget import WingetClient

__all__ = [
    "AppProcessor",
    "DependencyService",
    "WingetClient",
    "WingetNotFoundError",
]
