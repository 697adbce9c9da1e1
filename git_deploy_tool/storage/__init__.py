# git_deploy_tool/storage/__init__.py
"""Artifact cache and site registry backends"""

from .base import CacheStorage, SiteRegistry
from .filesystem import FilesystemCacheStorage, MemoryCacheStorage
from .sites import StaticSiteRegistry
from .factory import CacheStorageFactory

__all__ = [
    'CacheStorage',
    'SiteRegistry',
    'FilesystemCacheStorage',
    'MemoryCacheStorage',
    'StaticSiteRegistry',
    'CacheStorageFactory',
]
