"""Cache storage factory"""

from typing import Dict, Optional, Type

from .base import CacheStorage, SiteRegistry
from .filesystem import FilesystemCacheStorage, MemoryCacheStorage
from ..models.config import CacheConfig


class CacheStorageFactory:
    """Factory for creating cache storage instances"""

    _backends: Dict[str, Type[CacheStorage]] = {
        "filesystem": FilesystemCacheStorage,
        "memory": MemoryCacheStorage,
    }

    @classmethod
    def create_from_config(cls,
                           config: CacheConfig,
                           site_registry: Optional[SiteRegistry] = None) -> CacheStorage:
        """Create cache storage from configuration

        Args:
            config: Cache configuration
            site_registry: Site registry for backends that need it

        Returns:
            Cache storage instance

        Raises:
            ValueError: If the cache type is not supported
        """
        if config.type not in cls._backends:
            raise ValueError(f"Unsupported cache type: {config.type}")

        if config.type == "filesystem":
            return FilesystemCacheStorage({"directory": config.directory}, site_registry)

        return cls._backends[config.type]()
