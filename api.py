from __future__ import annotations

import logging
import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ValidationError

from assetscan.config import load_config
from assetscan.errors import ScanError
from assetscan.model import Inventory
from assetscan.scanner import get_referenced_assets, scan_tree
from assetscan.summarize import summarize_inventory

logger = logging.getLogger(__name__)

app = FastAPI(title="Asset Scanner")


class ScanRequest(BaseModel):
	root_path: Optional[str] = None
	filenames: Optional[List[str]] = None
	root_token: Optional[str] = None


@app.get("/health")
def health() -> dict:
	return {"status": "ok"}


@app.post("/scan", response_model=Inventory)
def scan(req: ScanRequest) -> Inventory:
	try:
		config = load_config(root_token=req.root_token)
	except ValidationError as e:
		raise HTTPException(status_code=400, detail="Invalid configuration: " + "; ".join(err["msg"] for err in e.errors())) from e

	try:
		if req.filenames is not None:
			bundles = get_referenced_assets(req.filenames, config)
		elif req.root_path:
			root = os.path.abspath(req.root_path)
			if not os.path.isdir(root):
				raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")
			bundles = scan_tree(root, config)
		else:
			raise HTTPException(status_code=400, detail="Either root_path or filenames is required")
	except ScanError as e:
		logger.info("scan failed: %s", e)
		raise HTTPException(status_code=422, detail=str(e)) from e

	return Inventory(bundles=bundles, summaries=summarize_inventory(bundles))


def create_app() -> FastAPI:
	return app
