from __future__ import annotations

from typing import Optional


class ScanError(Exception):
	"""Base class for failures raised while scanning source files."""

	def __init__(self, message: str, filename: str, lineno: Optional[int] = None):
		self.filename = filename
		self.lineno = lineno
		location = f"{filename}:{lineno}" if lineno else filename
		super().__init__(f"{location}: {message}")


class SourceParseError(ScanError):
	"""The file could not be read or is not valid source. Aborts the scan."""


class UnknownMethodError(ScanError):
	"""A call on the root token used a method the asset API does not define."""

	def __init__(self, method: str, root_token: str, filename: str, lineno: Optional[int] = None):
		self.method = method
		super().__init__(f"unknown call to {root_token}.{method}", filename, lineno)


class PathResolutionError(ScanError):
	"""A group's directory could not be turned into an absolute path."""
