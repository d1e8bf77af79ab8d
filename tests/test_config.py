import pytest
from pydantic import ValidationError

from assetscan.config import DEFAULT_EXCLUDE_DIRS, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
	monkeypatch.delenv("ASSETSCAN_ROOT_TOKEN", raising=False)
	monkeypatch.delenv("ASSETSCAN_EXCLUDE", raising=False)


def test_defaults():
	config = load_config()
	assert config.root_token == "mewn"
	assert config.group_method == "Group"
	assert config.asset_methods == ("String", "MustString", "Bytes", "MustBytes")
	assert config.exclude_dirs == DEFAULT_EXCLUDE_DIRS


def test_environment_and_overrides(monkeypatch):
	monkeypatch.setenv("ASSETSCAN_ROOT_TOKEN", "assets")
	monkeypatch.setenv("ASSETSCAN_EXCLUDE", "vendor, third_party,")
	config = load_config()
	assert config.root_token == "assets"
	assert config.exclude_dirs == DEFAULT_EXCLUDE_DIRS + ("vendor", "third_party")

	overridden = load_config(root_token="box", group_method=None)
	assert overridden.root_token == "box"
	assert overridden.group_method == "Group"


def test_empty_environment_value_keeps_default(monkeypatch):
	monkeypatch.setenv("ASSETSCAN_ROOT_TOKEN", "")
	assert load_config().root_token == "mewn"


def test_exclude_does_not_repeat_defaults():
	config = load_config(exclude=(".git", "vendor"))
	assert config.exclude_dirs == DEFAULT_EXCLUDE_DIRS + ("vendor",)


def test_invalid_root_token_rejected(monkeypatch):
	with pytest.raises(ValidationError):
		load_config(root_token="not a name")

	monkeypatch.setenv("ASSETSCAN_ROOT_TOKEN", "not valid")
	with pytest.raises(ValidationError):
		load_config()


def test_unknown_setting_rejected():
	with pytest.raises(ValidationError):
		load_config(colour="blue")
