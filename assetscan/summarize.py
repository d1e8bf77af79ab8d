from __future__ import annotations

from typing import Dict, List

from .model import Bundle, Summaries


def summarize_bundle(b: Bundle) -> str:
	parts: List[str] = []
	parts.append(f"Bundle {b.package_name} at {b.base_dir} (first seen in {b.caller})")
	if b.groups:
		parts.append(f"  Groups: {', '.join(f'{g.name}={g.local_path}' for g in b.groups)}")
	direct = [a.name for a in b.assets if a.group is None]
	if direct:
		parts.append(f"  Assets: {', '.join(direct)}")
	grouped = [f"{a.group.name}/{a.name}" for a in b.assets if a.group is not None]
	if grouped:
		parts.append(f"  Group assets: {', '.join(grouped)}")
	return "\n".join(parts)


def summarize_inventory(bundles: List[Bundle]) -> Summaries:
	per_bundle: Dict[str, str] = {}
	for b in bundles:
		per_bundle[b.base_dir] = summarize_bundle(b)

	global_overview = (
		f"{len(bundles)} bundles, "
		f"{sum(len(b.groups) for b in bundles)} groups, "
		f"{sum(len(b.assets) for b in bundles)} assets"
	)

	return Summaries(global_overview=global_overview, per_bundle=per_bundle)
