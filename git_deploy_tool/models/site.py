"""Site and site URI models"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Any


@dataclass(frozen=True)
class Site:
    """A content source within the surrounding application"""

    id: int
    uid: str
    handle: Optional[str] = None
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Get a human readable name for the site"""
        return self.name or self.handle or self.uid

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Site':
        """Create from dictionary"""
        return cls(
            id=int(data["id"]),
            uid=str(data["uid"]),
            handle=data.get("handle"),
            name=data.get("name"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {"id": self.id, "uid": self.uid}
        if self.handle:
            data["handle"] = self.handle
        if self.name:
            data["name"] = self.name
        return data


@dataclass(frozen=True)
class SiteUri:
    """A cached page identified by its site and URI"""

    site_id: int
    uri: str

    def __str__(self) -> str:
        return f"{self.site_id}:{self.uri}"


def group_by_site(site_uris: Iterable[SiteUri]) -> Dict[int, List[SiteUri]]:
    """
    Partition site URIs by the site that owns them

    Args:
        site_uris: Site URIs in any order

    Returns:
        Mapping of site ID to its site URIs, in order of first appearance
    """
    grouped: Dict[int, List[SiteUri]] = OrderedDict()

    for site_uri in site_uris:
        grouped.setdefault(site_uri.site_id, []).append(site_uri)

    return grouped
