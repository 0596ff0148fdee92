import pytest
from starlette.staticfiles import StaticFiles

from nova_users.core.config import Settings
from nova_users.infrastructure.web.assets import (
    CachedStaticFiles,
    assets_css,
    assets_js,
    create_assets_app,
    resource_url,
    site_url,
)


class DummyDispatcher(StaticFiles):
    def __init__(self, directory: str, cache_time: int) -> None:
        super().__init__(directory=directory)
        self.cache_time = cache_time


def test_site_url():
    assert site_url() == "/"
    assert site_url("roles") == "/roles"
    assert site_url("/roles/3/edit") == "/roles/3/edit"


def test_resource_url_lowercases_module():
    assert resource_url("css/style.css", "Bootstrap") == "/assets/bootstrap/css/style.css"
    assert resource_url("/images/nova.svg") == "/assets/images/nova.svg"


def test_asset_tags_escape_urls():
    css = assets_css(["/assets/a.css", 'https://cdn.example/x.css?a=1&b="2"'])
    js = assets_js(["/assets/a.js"])

    assert '<link href="/assets/a.css" rel="stylesheet" type="text/css">' in css
    assert "a=1&amp;b=&#34;2&#34;" in css
    assert js == '<script src="/assets/a.js" type="text/javascript"></script>'


def test_default_driver_serves_package_static():
    app = create_assets_app(Settings(_env_file=None, assets_cache_time=60))

    assert isinstance(app, CachedStaticFiles)
    assert app.cache_time == 60


def test_custom_driver_imports_dispatcher():
    settings = Settings(
        _env_file=None,
        assets_driver="custom",
        assets_dispatcher=f"{__name__}.DummyDispatcher",
        assets_cache_time=5,
    )

    app = create_assets_app(settings)

    assert isinstance(app, DummyDispatcher)
    assert app.cache_time == 5


def test_custom_driver_with_bad_path():
    settings = Settings(_env_file=None, assets_driver="custom", assets_dispatcher="Dispatcher")

    with pytest.raises(ImportError):
        create_assets_app(settings)
