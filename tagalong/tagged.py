"""
Class labels, the S3 way: a string stuck on a value after the fact.

Nothing here checks that a value has the shape its label promises.
You can call a list of numbers "MyDNASeq" and nobody will stop you
until some method goes looking for a field that isn't there.
"""
from typing import Any

class Tagged:
	""" Any value at all, wearing a class label that anyone may change at any time. """
	tag: str
	
	def __init__(self, payload: Any, tag: str):
		assert isinstance(tag, str), tag
		self.payload, self.tag = payload, tag
	
	def __repr__(self): return "<%s %r>" % (self.tag, self.payload)
	
	def __getitem__(self, key):
		# Stands in for `x$field`.
		return self.payload[key]

def _element_class(x) -> str:
	if isinstance(x, bool): return "logical"
	if isinstance(x, int): return "integer"
	if isinstance(x, float): return "numeric"
	if isinstance(x, complex): return "complex"
	if isinstance(x, str): return "character"
	return ""

def _vector_class(items) -> str:
	kinds = set(map(_element_class, items))
	if len(kinds) == 1 and "" not in kinds:
		return kinds.pop()
	if kinds and kinds <= {"integer", "numeric"}:
		return "numeric"
	return "list"

def implicit_class(value) -> str:
	""" What R would say `class(value)` is, had nobody assigned one. """
	if value is None: return "NULL"
	simple = _element_class(value)
	if simple: return simple
	if isinstance(value, dict): return "list"
	if isinstance(value, (list, tuple)): return _vector_class(value)
	if callable(value): return "function"
	return type(value).__name__

def class_of(value) -> str:
	if isinstance(value, Tagged): return value.tag
	return implicit_class(value)

def set_class(value, tag:str):
	"""
	The equivalent of `class(value) <- tag`.
	An already-tagged value is re-labeled in place; anything else gets wrapped.
	"""
	if isinstance(value, Tagged):
		assert isinstance(tag, str), tag
		value.tag = tag
		return value
	return Tagged(value, tag)

def unclass(value):
	return value.payload if isinstance(value, Tagged) else value

def inherits(value, tag:str) -> bool:
	# Only one label per value, so "inherits" collapses to equality.
	return class_of(value) == tag

_MODE = {
	"logical": "logical",
	"integer": "numeric",
	"numeric": "numeric",
	"complex": "complex",
	"character": "character",
	"list": "list",
	"function": "function",
	"NULL": "NULL",
}

def mode_of(value) -> str:
	""" Storage mode, which ignores any class label. """
	return _MODE.get(implicit_class(unclass(value)), "list")
