from __future__ import annotations

import logging
import os
from typing import Dict

from .ast_parse import AssignStmt
from .config import ScanConfig
from .errors import PathResolutionError, UnknownMethodError
from .fs_scan import source_dir
from .model import AssetReference, Bundle, Group

logger = logging.getLogger(__name__)


def resolve_group_path(filename: str, local_path: str) -> str:
	if "\x00" in local_path:
		raise PathResolutionError(f"cannot resolve group path {local_path!r}: embedded null byte", filename)
	try:
		return os.path.abspath(os.path.join(source_dir(filename), local_path))
	except (OSError, ValueError) as e:
		raise PathResolutionError(f"cannot resolve group path {local_path!r}: {e}", filename) from e


def _add_asset(bundle: Bundle, asset: AssetReference, filename: str, lineno: int) -> None:
	if bundle.add_asset(asset):
		logger.debug("%s:%d: asset %r", filename, lineno, asset.name)
	else:
		logger.debug("%s:%d: duplicate asset %r dropped", filename, lineno, asset.name)


def resolve_assignment(
	assign: AssignStmt,
	bundle: Bundle,
	groups: Dict[str, Group],
	filename: str,
	config: ScanConfig,
) -> None:
	"""Record what a matched assignment declares in bundle and groups.

	Calls on the root token declare a group or a direct asset. Calls on a name
	already in ``groups`` declare an asset inside that group. Anything else is
	not part of the asset API and is ignored.

	Raises UnknownMethodError for an unrecognised method on the root token and
	PathResolutionError when a group directory cannot be made absolute.
	"""
	call = assign.rhs

	if call.obj == config.root_token:
		if call.method == config.group_method:
			full_path = resolve_group_path(filename, call.path)
			group = Group(name=assign.lhs, local_path=call.path, full_path=full_path)
			bundle.add_group(group)
			groups[assign.lhs] = group
			logger.debug("%s:%d: group %s -> %s", filename, call.lineno, group.name, full_path)
		elif call.method in config.asset_methods:
			asset = AssetReference(name=call.path, asset_path=call.path)
			_add_asset(bundle, asset, filename, call.lineno)
		else:
			raise UnknownMethodError(call.method, config.root_token, filename, call.lineno)
		return

	group = groups.get(call.obj)
	if group is None:
		return
	asset = AssetReference(name=call.path, asset_path=call.path, group=group)
	_add_asset(bundle, asset, filename, call.lineno)
