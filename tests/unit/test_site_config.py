"""Unit tests for site configuration resolution."""

import pytest

from vitrine.contexts.presentation.defaults import DEFAULT_NAV, DEFAULT_SITE
from vitrine.contexts.presentation.site_config import load_site_config


@pytest.mark.unit
def test_defaults_without_config_file(tmp_path):
    config = load_site_config(tmp_path / "site.yaml")

    assert config["site_name"] == DEFAULT_SITE["site_name"]
    assert config["scheduling_url"] == DEFAULT_SITE["scheduling_url"]
    assert [link["href"] for link in config["nav"]] == [link["href"] for link in DEFAULT_NAV]
    assert len(config["hero"]["achievements"]) == 4


@pytest.mark.unit
def test_file_overrides_subset(tmp_path):
    """Test that a partial file overrides only the keys it sets."""
    path = tmp_path / "site.yaml"
    path.write_text(
        "site_name: My Portfolio\ncontact:\n  title: Say hello\n",
        encoding="utf-8",
    )

    config = load_site_config(path)

    assert config["site_name"] == "My Portfolio"
    assert config["contact"]["title"] == "Say hello"
    assert config["contact"]["subtitle"]
    assert config["author"] == DEFAULT_SITE["author"]


@pytest.mark.unit
def test_defaults_not_mutated_between_loads(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text("site_name: Changed\n", encoding="utf-8")

    load_site_config(path)["nav"].append({"label": "Extra", "href": "/x"})

    assert len(load_site_config(tmp_path / "absent.yaml")["nav"]) == len(DEFAULT_NAV)


@pytest.mark.unit
def test_non_mapping_file_rejected(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must be a mapping"):
        load_site_config(path)


@pytest.mark.unit
def test_blank_required_setting_rejected(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text("scheduling_url: ''\n", encoding="utf-8")

    with pytest.raises(ValueError, match="scheduling_url"):
        load_site_config(path)
