"""Static scanner for embedded-asset declarations in Python sources.

Modules:
- ast_parse.py: AST parsing and matching of ``name = obj.method("path")`` assignments.
- resolver.py: Classification of matched calls into groups and asset references.
- registry.py: Per-directory bundle bookkeeping for one scan.
- scanner.py: Scan driver over an ordered list of files.
- fs_scan.py: Source file discovery in a stable order.
- model.py: Data structures for groups, assets and bundles.
- summarize.py: Deterministic textual summaries of an inventory.
"""

from .config import ScanConfig, load_config
from .errors import PathResolutionError, ScanError, SourceParseError, UnknownMethodError
from .model import AssetReference, Bundle, Group
from .scanner import get_referenced_assets, scan_source, scan_tree

__all__ = [
	"AssetReference",
	"Bundle",
	"Group",
	"PathResolutionError",
	"ScanConfig",
	"ScanError",
	"SourceParseError",
	"UnknownMethodError",
	"get_referenced_assets",
	"load_config",
	"scan_source",
	"scan_tree",
]
