# git_deploy_tool/storage/base.py
"""Artifact cache and site registry abstract base classes"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.site import Site, SiteUri


class CacheStorage(ABC):
    """Read access to the cached page artifacts"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize cache storage

        Args:
            config: Backend-specific configuration
        """
        self.config = config or {}

    @abstractmethod
    def get(self, site_uri: SiteUri) -> str:
        """
        Get the cached content of a page

        Args:
            site_uri: Site URI

        Returns:
            Cached content, empty when the page is no longer cached
        """
        pass

    def get_cached_site_uris(self, site_id: int) -> List[SiteUri]:
        """
        List the cached pages of a site

        Args:
            site_id: Site ID

        Returns:
            Site URIs with cached content
        """
        return []


class SiteRegistry(ABC):
    """Maps between numeric site IDs and stable site UIDs"""

    @abstractmethod
    def get_uid_by_id(self, site_id: int) -> Optional[str]:
        """Get the UID of a site, None if unknown"""
        pass

    @abstractmethod
    def get_id_by_uid(self, site_uid: str) -> Optional[int]:
        """Get the ID of a site, None if unknown"""
        pass

    @abstractmethod
    def get_site_by_uid(self, site_uid: str) -> Optional[Site]:
        """Get a site by UID, None if unknown"""
        pass

    def get_site_by_handle(self, handle: str) -> Optional[Site]:
        """Get a site by handle, None if unknown"""
        return None

    def get_all_sites(self) -> List[Site]:
        """Get all known sites"""
        return []
