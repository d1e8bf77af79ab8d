from __future__ import annotations

import ast
import logging
import os
from typing import Dict, Iterable, List, Optional

from .ast_parse import parse_assignment, parse_source, read_and_parse
from .config import ScanConfig
from .errors import PathResolutionError
from .fs_scan import find_source_files, source_dir, to_package_name
from .model import Bundle, Group
from .registry import BundleRegistry
from .resolver import resolve_assignment

logger = logging.getLogger(__name__)


class _AssignmentVisitor(ast.NodeVisitor):
	"""Walks a module depth-first in source order, resolving asset assignments."""

	def __init__(self, filename: str, bundle: Bundle, groups: Dict[str, Group], config: ScanConfig):
		self.filename = filename
		self.bundle = bundle
		self.groups = groups
		self.config = config

	def _visit_assignment(self, node: ast.AST) -> None:
		assign = parse_assignment(node)
		if assign is not None:
			resolve_assignment(assign, self.bundle, self.groups, self.filename, self.config)
		self.generic_visit(node)

	visit_Assign = _visit_assignment
	visit_AnnAssign = _visit_assignment


def _walk(tree: ast.Module, filename: str, bundle: Bundle, groups: Dict[str, Group], config: ScanConfig) -> None:
	try:
		_AssignmentVisitor(filename, bundle, groups, config).visit(tree)
	except PathResolutionError as e:
		# Stop this file; what it declared so far stays in the bundle
		logger.warning("%s; skipping rest of file", e)


def scan_source(
	filename: str,
	text: str,
	bundle: Bundle,
	groups: Dict[str, Group],
	config: Optional[ScanConfig] = None,
) -> Bundle:
	"""Scan in-memory source text for filename into an existing bundle."""
	config = config or ScanConfig()
	_walk(parse_source(filename, text), filename, bundle, groups, config)
	return bundle


def get_referenced_assets(filenames: Iterable[str], config: Optional[ScanConfig] = None) -> List[Bundle]:
	"""Scan files in the given order and return one bundle per source directory.

	Groups are shared across all files of the call, so a group has to be
	declared in an earlier file (or earlier in the same file) than the items
	that use it. Raises SourceParseError or UnknownMethodError on the first
	fatal problem; nothing is returned in that case.
	"""
	config = config or ScanConfig()
	registry = BundleRegistry()
	groups: Dict[str, Group] = {}

	count = 0
	for filename in filenames:
		tree = read_and_parse(filename)
		base_dir = source_dir(filename)
		bundle = registry.get_or_create(base_dir, filename, to_package_name(base_dir))
		_walk(tree, filename, bundle, groups, config)
		count += 1

	bundles = registry.finalize()
	logger.info(
		"scanned %d files: %d bundles, %d groups, %d assets",
		count,
		len(bundles),
		sum(len(b.groups) for b in bundles),
		sum(len(b.assets) for b in bundles),
	)
	return bundles


def scan_tree(root: str, config: Optional[ScanConfig] = None) -> List[Bundle]:
	config = config or ScanConfig()
	filenames = find_source_files(root, config.exclude_dirs, config.extensions)
	logger.info("found %d source files under %s", len(filenames), os.path.abspath(root))
	return get_referenced_assets(filenames, config)
