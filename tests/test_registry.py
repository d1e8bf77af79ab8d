from assetscan.model import AssetReference, Bundle
from assetscan.registry import BundleRegistry


def test_get_or_create_is_idempotent_first_caller_wins():
	registry = BundleRegistry()
	first = registry.get_or_create("pkg", "pkg/a.py", "pkg")
	second = registry.get_or_create("pkg", "pkg/b.py", "other")
	assert first is second
	assert first.caller == "pkg/a.py"
	assert first.package_name == "pkg"
	assert len(registry) == 1
	assert "pkg" in registry


def test_finalize_keeps_first_encounter_order():
	registry = BundleRegistry()
	for d in ["zeta", "alpha", "mid", "alpha"]:
		registry.get_or_create(d, f"{d}/x.py", d)
	assert [b.base_dir for b in registry.finalize()] == ["zeta", "alpha", "mid"]


def test_bundle_add_asset_suppresses_duplicates():
	b = Bundle(base_dir=".", caller="x.py", package_name="pkg")
	assert b.add_asset(AssetReference(name="a.txt", asset_path="a.txt"))
	assert not b.add_asset(AssetReference(name="a.txt", asset_path="other"))
	assert b.has_asset("a.txt")
	assert not b.has_asset("b.txt")
	assert b.assets[0].asset_path == "a.txt"
