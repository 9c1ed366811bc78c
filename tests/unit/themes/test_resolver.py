from __future__ import annotations

from pathlib import Path

import pytest

from themeloom.core.config import load_settings
from themeloom.core.exceptions import (
    ConfigFileError,
    LocalPluginResolutionError,
    UnresolvableThemeError,
)
from themeloom.core.themes.local import LocalPluginResolver
from themeloom.core.themes.resolver import ThemeResolver
from themeloom.core.themes.spec import ThemeSpec


@pytest.fixture
def resolver(settings) -> ThemeResolver:
    return ThemeResolver(settings)


def test_resolves_installed_theme_with_yaml_config(resolver: ThemeResolver, site) -> None:
    theme_dir = site.theme("theme-alpha", {"plugins": ["theme-beta"], "title": "Alpha"})

    resolved = resolver.resolve("theme-alpha", site.config_file, True, site.root)

    assert resolved.theme_name == "theme-alpha"
    assert resolved.theme_dir == theme_dir
    assert resolved.parent_dir == site.root
    assert resolved.theme_config == {"plugins": ["theme-beta"], "title": "Alpha"}
    assert resolved.theme_spec == ThemeSpec("theme-alpha", {})
    assert resolved.config_file_path == theme_dir / "site-config.yaml"


def test_theme_without_config_has_no_theme_config(resolver: ThemeResolver, site) -> None:
    site.theme("code-only-theme")
    resolved = resolver.resolve("code-only-theme", site.config_file, True, site.root)
    assert resolved.theme_config is None
    assert resolved.declared_plugins() == []


def test_factory_config_receives_options(resolver: ThemeResolver, site) -> None:
    site.theme(
        "theme-factory",
        python="""
        def default(options):
            return {"site_metadata": {"base_path": options.get("base_path", "/")}}
        """,
    )

    resolved = resolver.resolve(
        {"resolve": "theme-factory", "options": {"base_path": "/blog"}},
        site.config_file,
        True,
        site.root,
    )

    assert resolved.theme_config == {"site_metadata": {"base_path": "/blog"}}
    assert resolved.theme_spec.options == {"base_path": "/blog"}


def test_factory_config_gets_empty_options_for_bare_string(resolver: ThemeResolver, site) -> None:
    site.theme("theme-factory", python="config = lambda options: {'seen': dict(options)}\n")
    resolved = resolver.resolve("theme-factory", site.config_file, True, site.root)
    assert resolved.theme_config == {"seen": {}}


def test_local_plugin_fallback_at_top_level(resolver: ThemeResolver, site) -> None:
    plugin_dir = site.local_plugin("local-theme")
    (plugin_dir / "site-config.yaml").write_text("title: Local\n", encoding="utf-8")

    resolved = resolver.resolve("local-theme", site.config_file, True, site.root)

    assert resolved.theme_dir == plugin_dir
    assert resolved.theme_config == {"title": "Local"}


def test_local_directory_that_is_not_a_plugin_is_skipped(resolver: ThemeResolver, site) -> None:
    site.local_plugin("not-a-plugin", manifest=None)
    assert resolver.resolve("not-a-plugin", site.config_file, True, site.root) is None


def test_missing_top_level_theme_is_fatal_with_context(resolver: ThemeResolver, site) -> None:
    with pytest.raises(UnresolvableThemeError) as exc_info:
        resolver.resolve("theme-missing", site.config_file, True, site.root)

    err = exc_info.value
    assert err.error_id == "10226"
    assert err.context["theme_name"] == "theme-missing"
    assert err.context["config_file_path"] == site.config_file
    assert err.context["path_to_local_theme"] == site.root / "plugins" / "theme-missing"
    assert str(site.root.resolve() / "themes" / "theme-missing") in err.context["resolution_paths"]
    assert "theme-missing" in str(err)


def test_nested_themes_do_not_use_local_plugins(resolver: ThemeResolver, site) -> None:
    site.local_plugin("local-only")
    parent_dir = site.theme("theme-parent")

    with pytest.raises(UnresolvableThemeError) as exc_info:
        resolver.resolve("local-only", parent_dir / "site-config.yaml", False, parent_dir)

    assert exc_info.value.context["path_to_local_theme"] is None
    assert exc_info.value.context["config_file_path"] == parent_dir / "site-config.yaml"


def test_restricted_mode_skips_missing_themes(site) -> None:
    resolver = ThemeResolver(load_settings(environ={"THEMELOOM_RESTRICTED_MODE": "true"}))
    assert resolver.resolve("theme-missing", site.config_file, True, site.root) is None
    assert resolver.resolve("theme-missing", site.config_file, False, site.root) is None


def test_local_resolver_failure_is_fatal(settings, site) -> None:
    class ExplodingLocalResolver(LocalPluginResolver):
        def resolve(self, identifier: str, root_dir: Path):
            raise PermissionError("denied")

    resolver = ThemeResolver(settings, local_resolver=ExplodingLocalResolver(settings))

    with pytest.raises(LocalPluginResolutionError) as exc_info:
        resolver.resolve("theme-missing", site.config_file, True, site.root)

    assert isinstance(exc_info.value.__cause__, PermissionError)
    assert exc_info.value.context["theme_name"] == "theme-missing"


def test_restricted_mode_does_not_consult_local_plugins(site) -> None:
    site.local_plugin("broken", manifest="name: [unclosed\n")
    site.local_plugin("local-theme")
    resolver = ThemeResolver(load_settings(environ={}, restricted_mode=True))

    assert resolver.resolve("broken", site.config_file, True, site.root) is None
    assert resolver.resolve("local-theme", site.config_file, True, site.root) is None


def test_failing_factory_config_names_the_config_file(resolver: ThemeResolver, site) -> None:
    theme_dir = site.theme(
        "theme-factory",
        python="""
        def default(options):
            return {"base_path": options["base_path"]}
        """,
    )

    with pytest.raises(ConfigFileError) as exc_info:
        resolver.resolve("theme-factory", site.config_file, True, site.root)

    assert exc_info.value.context["config_file_path"] == str(theme_dir / "site-config.py")
    assert isinstance(exc_info.value.__cause__, KeyError)
