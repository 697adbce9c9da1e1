"""Deploy service wiring configuration, cache, plugins and deployer"""

import logging
from typing import Iterable, List, Optional

from ..api.deployer import GitDeployer
from ..api.exceptions import ConfigError
from ..models.result import DeployResult
from ..models.run import ProgressHandler
from ..models.site import Site, SiteUri
from ..plugins import PluginLoader, PluginManager
from .config_service import ConfigService

logger = logging.getLogger(__name__)


class DeployService:
    """Builds a deployer from the configuration file and runs it"""

    def __init__(self,
                 config_service: ConfigService,
                 plugin_manager: Optional[PluginManager] = None):
        """Initialize deploy service

        Args:
            config_service: Loaded configuration
            plugin_manager: Receives the lifecycle notifications; plugins
                listed in the settings are loaded into it
        """
        self.config_service = config_service
        self.plugin_manager = plugin_manager or PluginManager()
        self.site_registry = config_service.create_site_registry()
        self.cache = config_service.create_cache_storage(self.site_registry)

        loader = PluginLoader(self.plugin_manager)
        loader.load_entry_points()

        settings = config_service.settings
        if settings.plugins:
            loader.load_modules(settings.plugins)

    def create_deployer(self) -> GitDeployer:
        """Create a deployer for the current settings"""
        return GitDeployer(
            settings=self.config_service.settings,
            cache=self.cache,
            site_registry=self.site_registry,
            before_commit=self.plugin_manager.before_commit,
            after_commit=self.plugin_manager.after_commit,
        )

    def get_site(self, handle_or_uid: str) -> Site:
        """Find a site by handle or UID

        Raises:
            ConfigError: If no such site is configured
        """
        site = (self.site_registry.get_site_by_handle(handle_or_uid) or
                self.site_registry.get_site_by_uid(handle_or_uid))

        if site is None:
            raise ConfigError(f"Unknown site: {handle_or_uid}")

        return site

    def collect_site_uris(self,
                          sites: Optional[Iterable[Site]] = None,
                          uris: Optional[Iterable[str]] = None) -> List[SiteUri]:
        """Build the site URIs to deploy

        Args:
            sites: Sites to deploy (all configured sites when None)
            uris: URIs to deploy for each site; every cached URI when empty

        Returns:
            Site URIs
        """
        sites = list(sites) if sites is not None else self.site_registry.get_all_sites()
        uris = list(uris or [])

        site_uris: List[SiteUri] = []
        for site in sites:
            if uris:
                site_uris.extend(SiteUri(site_id=site.id, uri=uri.strip('/')) for uri in uris)
            else:
                site_uris.extend(self.cache.get_cached_site_uris(site.id))

        return site_uris

    def deploy(self,
               site_uris: Iterable[SiteUri],
               progress_handler: Optional[ProgressHandler] = None) -> DeployResult:
        """Deploy site URIs

        Returns:
            DeployResult summary
        """
        deployer = self.create_deployer()
        result = deployer.deploy_with_progress(site_uris, progress_handler)
        logger.info(f"Deployment finished in {result.duration:.2f}s")
        return result

    def test(self) -> GitDeployer:
        """Validate settings and repositories

        Returns:
            The deployer holding the recorded errors
        """
        deployer = self.create_deployer()
        deployer.test()
        return deployer
