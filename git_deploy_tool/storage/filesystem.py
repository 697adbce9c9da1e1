"""Filesystem artifact cache"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .base import CacheStorage, SiteRegistry
from ..constants import DEPLOYED_FILE_NAME
from ..models.site import SiteUri

logger = logging.getLogger(__name__)


class FilesystemCacheStorage(CacheStorage):
    """Cache stored as ``<directory>/<site>/<uri>/index.html``

    The site folder is the site handle when known, otherwise its ID.
    """

    def __init__(self, config: Dict[str, Any] = None, site_registry: Optional[SiteRegistry] = None):
        """
        Initialize filesystem cache storage

        Args:
            config: Configuration including:
                - directory: Cache root directory
            site_registry: Resolves site handles
        """
        super().__init__(config)
        self.site_registry = site_registry
        self.base_path = Path(self.config.get('directory', '.blitz-cache')).expanduser()

    def get_site_path(self, site_id: int) -> Path:
        """Get the cache directory of a site"""
        folder = str(site_id)

        if self.site_registry is not None:
            site_uid = self.site_registry.get_uid_by_id(site_id)
            site = self.site_registry.get_site_by_uid(site_uid) if site_uid else None
            if site is not None and site.handle:
                folder = site.handle

        return self.base_path / folder

    def get_file_path(self, site_uri: SiteUri) -> Path:
        """Get the cache file of a page"""
        uri = site_uri.uri.strip('/')
        site_path = self.get_site_path(site_uri.site_id)

        if uri:
            return site_path / uri / DEPLOYED_FILE_NAME
        return site_path / DEPLOYED_FILE_NAME

    def get(self, site_uri: SiteUri) -> str:
        file_path = self.get_file_path(site_uri)

        if not file_path.is_file():
            return ''

        try:
            return file_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Unable to read cached page {file_path}: {e}")
            return ''

    def get_cached_site_uris(self, site_id: int) -> List[SiteUri]:
        site_path = self.get_site_path(site_id)

        if not site_path.is_dir():
            return []

        site_uris = []
        for file_path in sorted(site_path.rglob(DEPLOYED_FILE_NAME)):
            uri = file_path.parent.relative_to(site_path).as_posix()
            site_uris.append(SiteUri(site_id=site_id, uri='' if uri == '.' else uri))

        return site_uris


class MemoryCacheStorage(CacheStorage):
    """In-memory cache, for embedding and tests"""

    def __init__(self, pages: Optional[Dict[SiteUri, str]] = None):
        super().__init__()
        self.pages: Dict[SiteUri, str] = dict(pages or {})

    def set(self, site_uri: SiteUri, content: str) -> None:
        """Store content for a page"""
        self.pages[site_uri] = content

    def get(self, site_uri: SiteUri) -> str:
        return self.pages.get(site_uri, '')

    def get_cached_site_uris(self, site_id: int) -> List[SiteUri]:
        return [
            site_uri for site_uri, content in self.pages.items()
            if site_uri.site_id == site_id and content
        ]
