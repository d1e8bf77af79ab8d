from __future__ import annotations

import os
from typing import Iterable, List

from .config import DEFAULT_EXCLUDE_DIRS


def source_dir(filename: str) -> str:
	return os.path.dirname(filename) or "."


def to_package_name(directory: str) -> str:
	name = os.path.basename(os.path.normpath(directory))
	if name in ("", ".", ".."):
		name = os.path.basename(os.path.abspath(directory))
	return name.replace("-", "_")


def find_source_files(
	root: str,
	exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
	extensions: Iterable[str] = (".py",),
) -> List[str]:
	"""List source files under root, directory by directory in lexical order.

	A directory's own files come before anything in its subdirectories, so a
	group declared in a parent package is registered before child packages use it.
	"""
	skip = set(exclude_dirs)
	suffixes = tuple(extensions)
	files: List[str] = []
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = sorted(d for d in dirnames if d not in skip)
		for filename in sorted(filenames):
			if filename.endswith(suffixes):
				files.append(os.path.join(dirpath, filename))
	return files
