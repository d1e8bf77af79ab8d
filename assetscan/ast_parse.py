from __future__ import annotations

import ast
from dataclasses import dataclass
from typing import Optional

from .errors import SourceParseError


@dataclass(frozen=True)
class CallStmt:
	obj: str
	method: str
	path: str
	lineno: int = 0

	def __str__(self) -> str:
		return f"{{ obj: '{self.obj}', method: '{self.method}', path: '{self.path}' }}"


@dataclass(frozen=True)
class AssignStmt:
	lhs: str
	rhs: CallStmt

	def __str__(self) -> str:
		return f"{self.lhs} = {self.rhs}"


def parse_source(path: str, text: str) -> ast.Module:
	try:
		return ast.parse(text, filename=path)
	except (SyntaxError, ValueError) as e:
		# ValueError covers source containing null bytes
		lineno = getattr(e, "lineno", None)
		msg = getattr(e, "msg", None) or str(e)
		raise SourceParseError(f"invalid source: {msg}", path, lineno) from e


def read_and_parse(path: str) -> ast.Module:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except (OSError, UnicodeDecodeError) as e:
		raise SourceParseError(f"cannot read file: {e}", path) from e
	return parse_source(path, text)


def parse_call_expr(node: ast.Call) -> Optional[CallStmt]:
	"""Match ``receiver.method("literal")`` and return its parts, else None."""
	if len(node.args) != 1 or node.keywords:
		return None

	fn = node.func
	if not isinstance(fn, ast.Attribute):
		return None
	if not isinstance(fn.value, ast.Name):
		return None

	arg = node.args[0]
	if not isinstance(arg, ast.Constant) or not isinstance(arg.value, str):
		return None

	return CallStmt(obj=fn.value.id, method=fn.attr, path=arg.value, lineno=node.lineno)


def parse_assignment(node: ast.AST) -> Optional[AssignStmt]:
	"""Match ``name = receiver.method("literal")`` (optionally annotated)."""
	if isinstance(node, ast.Assign):
		if len(node.targets) != 1:
			return None
		target = node.targets[0]
	elif isinstance(node, ast.AnnAssign):
		if node.value is None:
			return None
		target = node.target
	else:
		return None

	if not isinstance(target, ast.Name):
		return None
	if not isinstance(node.value, ast.Call):
		return None

	call = parse_call_expr(node.value)
	if call is None:
		return None
	return AssignStmt(lhs=target.id, rhs=call)
