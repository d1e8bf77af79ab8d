from __future__ import annotations

from typing import Dict, List

from .model import Bundle


class BundleRegistry:
	"""Per-scan collection of bundles keyed by source directory."""

	def __init__(self):
		self._bundles: Dict[str, Bundle] = {}

	def get_or_create(self, base_dir: str, caller: str, package_name: str) -> Bundle:
		"""Return the bundle for base_dir, creating it on first use.

		The caller and package name of the first file seen in a directory are kept.
		"""
		bundle = self._bundles.get(base_dir)
		if bundle is None:
			bundle = Bundle(base_dir=base_dir, caller=caller, package_name=package_name)
			self._bundles[base_dir] = bundle
		return bundle

	def finalize(self) -> List[Bundle]:
		# dicts keep insertion order, i.e. first directory encounter
		return list(self._bundles.values())

	def __len__(self) -> int:
		return len(self._bundles)

	def __contains__(self, base_dir: object) -> bool:
		return base_dir in self._bundles
