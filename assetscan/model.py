from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict


class Group(BaseModel):
	"""A named base directory declared through the asset API."""

	model_config = ConfigDict(frozen=True)

	name: str
	local_path: str
	full_path: str


class AssetReference(BaseModel):
	"""One embedded-asset call site. ``group`` is None for direct references."""

	model_config = ConfigDict(frozen=True)

	name: str
	asset_path: str
	group: Optional[Group] = None


class Bundle(BaseModel):
	"""Assets and groups referenced from a single source directory."""

	base_dir: str
	caller: str
	package_name: str
	groups: List[Group] = []
	assets: List[AssetReference] = []

	def has_asset(self, name: str) -> bool:
		return any(asset.name == name for asset in self.assets)

	def add_asset(self, asset: AssetReference) -> bool:
		# First declaration of a name wins
		if self.has_asset(asset.name):
			return False
		self.assets.append(asset)
		return True

	def add_group(self, group: Group) -> None:
		self.groups.append(group)


class Summaries(BaseModel):
	global_overview: str
	per_bundle: Dict[str, str]


class Inventory(BaseModel):
	bundles: List[Bundle]
	summaries: Optional[Summaries] = None
