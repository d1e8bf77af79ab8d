from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from assetscan.config import load_config
from assetscan.errors import ScanError
from assetscan.fs_scan import find_source_files
from assetscan.scanner import get_referenced_assets
from assetscan.summarize import summarize_inventory


def _expand_paths(paths: List[str], exclude_dirs, extensions) -> List[str]:
	filenames: List[str] = []
	for path in paths:
		if os.path.isdir(path):
			filenames.extend(find_source_files(path, exclude_dirs, extensions))
		else:
			filenames.append(path)
	return filenames


def cmd_scan(args: argparse.Namespace) -> int:
	try:
		config = load_config(root_token=args.root_token)
	except ValidationError as e:
		print(f"assetscan: invalid configuration: {e}", file=sys.stderr)
		return 2
	if args.exclude:
		config = config.model_copy(update={"exclude_dirs": config.exclude_dirs + tuple(args.exclude)})
	filenames = _expand_paths(args.paths, config.exclude_dirs, config.extensions)
	try:
		bundles = get_referenced_assets(filenames, config)
	except ScanError as e:
		print(f"assetscan: {e}", file=sys.stderr)
		return 1

	out = {"bundles": [b.model_dump() for b in bundles]}
	if args.summary:
		out["summaries"] = summarize_inventory(bundles).model_dump()
	print(json.dumps(out, indent=2))
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def _configure_logging(verbosity: int) -> None:
	level = logging.WARNING
	if verbosity == 1:
		level = logging.INFO
	elif verbosity > 1:
		level = logging.DEBUG
	logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
	parser = argparse.ArgumentParser(prog="assetscan")
	parser.add_argument("-v", "--verbose", action="count", default=0)
	sub = parser.add_subparsers(dest="cmd", required=True)

	ps = sub.add_parser("scan", help="Scan source files and print the asset inventory as JSON")
	ps.add_argument("paths", nargs="+", help="Source files or directories, scanned in the order given")
	ps.add_argument("--root-token", default=None, help="Name of the asset API module (default: mewn)")
	ps.add_argument("--exclude", action="append", default=[], help="Extra directory name to skip")
	ps.add_argument("--summary", action="store_true", help="Include text summaries")
	ps.set_defaults(func=cmd_scan)

	pv = sub.add_parser("serve", help="Run FastAPI server")
	pv.add_argument("--host", default="127.0.0.1")
	pv.add_argument("--port", type=int, default=8000)
	pv.add_argument("--reload", action="store_true")
	pv.set_defaults(func=cmd_serve)

	args = parser.parse_args(argv)
	_configure_logging(args.verbose)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
