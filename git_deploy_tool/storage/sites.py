"""Site registry backed by configuration"""

from typing import Any, Dict, Iterable, List, Optional

from .base import SiteRegistry
from ..models.site import Site


class StaticSiteRegistry(SiteRegistry):
    """Site registry built from a fixed list of sites"""

    def __init__(self, sites: Iterable[Site] = ()):
        self._by_id: Dict[int, Site] = {}
        self._by_uid: Dict[str, Site] = {}

        for site in sites:
            self.add(site)

    @classmethod
    def from_config(cls, data: Iterable[Dict[str, Any]]) -> 'StaticSiteRegistry':
        """Create from the `sites` settings section"""
        return cls(Site.from_dict(item) for item in data)

    def add(self, site: Site) -> None:
        """Register a site"""
        self._by_id[site.id] = site
        self._by_uid[site.uid] = site

    def get_uid_by_id(self, site_id: int) -> Optional[str]:
        site = self._by_id.get(site_id)
        return site.uid if site else None

    def get_id_by_uid(self, site_uid: str) -> Optional[int]:
        site = self._by_uid.get(site_uid)
        return site.id if site else None

    def get_site_by_uid(self, site_uid: str) -> Optional[Site]:
        return self._by_uid.get(site_uid)

    def get_site_by_handle(self, handle: str) -> Optional[Site]:
        for site in self._by_id.values():
            if site.handle == handle:
                return site
        return None

    def get_all_sites(self) -> List[Site]:
        return list(self._by_id.values())
