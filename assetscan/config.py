from __future__ import annotations

from typing import Annotated, Tuple

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


DEFAULT_EXCLUDE_DIRS: Tuple[str, ...] = (".git", "node_modules", "dist", "build", "__pycache__")


class ScanConfig(BaseSettings):
	"""Scan settings.

	Loads from environment variables automatically:
		ASSETSCAN_ROOT_TOKEN, ASSETSCAN_EXCLUDE (comma-separated extra directories)

	Keyword arguments take precedence over the environment.
	"""

	root_token: str = "mewn"
	group_method: str = "Group"
	asset_methods: Tuple[str, ...] = ("String", "MustString", "Bytes", "MustBytes")
	exclude_dirs: Tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
	exclude: Annotated[Tuple[str, ...], NoDecode] = ()
	extensions: Tuple[str, ...] = (".py",)

	model_config = SettingsConfigDict(
		env_prefix="ASSETSCAN_",
		env_ignore_empty=True,
		extra="forbid",
	)

	@field_validator("root_token", "group_method")
	@classmethod
	def _must_be_identifier(cls, value: str) -> str:
		if not value.isidentifier():
			raise ValueError(f"not a valid identifier: {value!r}")
		return value

	@field_validator("exclude", mode="before")
	@classmethod
	def _split_exclude(cls, value):
		if isinstance(value, str):
			return tuple(d.strip() for d in value.split(",") if d.strip())
		return value

	@model_validator(mode="after")
	def _merge_exclude(self) -> ScanConfig:
		extra = tuple(d for d in self.exclude if d not in self.exclude_dirs)
		self.exclude_dirs = self.exclude_dirs + extra
		return self


def load_config(**overrides) -> ScanConfig:
	"""Build a ScanConfig from ASSETSCAN_* environment variables and explicit overrides.

	Overrides whose value is None are ignored so CLI flags and request fields can
	be passed straight through.
	"""
	return ScanConfig(**{key: value for key, value in overrides.items() if value is not None})
