from assetscan.model import AssetReference, Bundle, Group
from assetscan.summarize import summarize_bundle, summarize_inventory


def test_summaries():
	g = Group(name="tpl", local_path="templates", full_path="/srv/app/templates")
	b = Bundle(base_dir="app", caller="app/main.py", package_name="app")
	b.add_group(g)
	b.add_asset(AssetReference(name="logo.png", asset_path="logo.png"))
	b.add_asset(AssetReference(name="index.html", asset_path="index.html", group=g))
	empty = Bundle(base_dir="lib", caller="lib/x.py", package_name="lib")

	text = summarize_bundle(b)
	assert "Bundle app at app" in text
	assert "Groups: tpl=templates" in text
	assert "Assets: logo.png" in text
	assert "Group assets: tpl/index.html" in text
	assert summarize_bundle(empty) == "Bundle lib at lib (first seen in lib/x.py)"

	summaries = summarize_inventory([b, empty])
	assert summaries.global_overview == "2 bundles, 1 groups, 2 assets"
	assert list(summaries.per_bundle) == ["app", "lib"]
