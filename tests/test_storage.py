import pytest

from git_deploy_tool.models import CacheConfig, Site, SiteUri
from git_deploy_tool.storage import (
    CacheStorageFactory,
    FilesystemCacheStorage,
    MemoryCacheStorage,
    StaticSiteRegistry,
)


@pytest.fixture
def cache_dir(tmp_path):
    (tmp_path / "one" / "about").mkdir(parents=True)
    (tmp_path / "one" / "index.html").write_text("home")
    (tmp_path / "one" / "about" / "index.html").write_text("about")
    (tmp_path / "2" / "news").mkdir(parents=True)
    (tmp_path / "2" / "news" / "index.html").write_text("news")
    return tmp_path


@pytest.fixture
def storage(cache_dir, site_registry):
    return FilesystemCacheStorage({"directory": str(cache_dir)}, site_registry)


def test_site_folder_uses_handle(storage, cache_dir):
    assert storage.get_site_path(1) == cache_dir / "one"


def test_reads_cached_pages(storage):
    assert storage.get(SiteUri(1, "about")) == "about"
    assert storage.get(SiteUri(1, "/about/")) == "about"
    assert storage.get(SiteUri(1, "")) == "home"
    assert storage.get(SiteUri(1, "missing")) == ""


def test_lists_cached_site_uris(storage):
    assert storage.get_cached_site_uris(1) == [SiteUri(1, "about"), SiteUri(1, "")]
    assert storage.get_cached_site_uris(3) == []


def test_site_without_handle_uses_id(cache_dir):
    registry = StaticSiteRegistry([Site(id=2, uid="site-two")])
    storage = FilesystemCacheStorage({"directory": str(cache_dir)}, registry)

    assert storage.get(SiteUri(2, "news")) == "news"


def test_memory_cache():
    cache = MemoryCacheStorage({SiteUri(1, "a"): "a", SiteUri(1, "b"): "", SiteUri(2, "c"): "c"})

    assert cache.get(SiteUri(1, "a")) == "a"
    assert cache.get(SiteUri(9, "x")) == ""
    assert cache.get_cached_site_uris(1) == [SiteUri(1, "a")]


def test_factory(tmp_path):
    storage = CacheStorageFactory.create_from_config(CacheConfig(directory=str(tmp_path)))
    assert isinstance(storage, FilesystemCacheStorage)
    assert isinstance(CacheStorageFactory.create_from_config(CacheConfig(type="memory")), MemoryCacheStorage)

    with pytest.raises(ValueError):
        CacheStorageFactory.create_from_config(CacheConfig(type="redis"))


def test_site_registry(site_registry):
    assert site_registry.get_uid_by_id(1) == "site-one"
    assert site_registry.get_id_by_uid("site-two") == 2
    assert site_registry.get_site_by_handle("three").uid == "site-three"
    assert site_registry.get_uid_by_id(42) is None
    assert len(site_registry.get_all_sites()) == 3


def test_site_registry_from_config():
    registry = StaticSiteRegistry.from_config([{"id": "4", "uid": "blog", "handle": "blog", "name": "Blog"}])

    assert registry.get_site_by_uid("blog") == Site(id=4, uid="blog", handle="blog", name="Blog")
