"""
Just enough statistics to give `summary` a default worth showing.
Data frames, models, and the rest of R's summary zoo are not attempted.
"""
from math import floor
from statistics import fmean
from .tagged import Tagged, class_of, mode_of, unclass

SUMMARY_CLASS = "summaryDefault"

def quantile(ordered:list, p:float) -> float:
	""" Linear interpolation between order statistics: R's default (type 7). """
	h = (len(ordered) - 1) * p
	lo = floor(h)
	if lo + 1 >= len(ordered): return ordered[lo]
	return ordered[lo] + (h - lo) * (ordered[lo+1] - ordered[lo])

def _numbers(x):
	if isinstance(x, bool) or not isinstance(x, (int, float, list, tuple)):
		return None
	items = x if isinstance(x, (list, tuple)) else [x]
	if items and all(isinstance(i, (int, float)) and not isinstance(i, bool) for i in items):
		return sorted(items)

def r_length(x) -> int:
	x = unclass(x)
	if x is None: return 0
	if isinstance(x, (list, tuple, dict)): return len(x)
	return 1

def summary_default(x) -> Tagged:
	ordered = _numbers(unclass(x))
	if ordered:
		table = {
			"Min.": ordered[0],
			"1st Qu.": quantile(ordered, 0.25),
			"Median": quantile(ordered, 0.5),
			"Mean": fmean(ordered),
			"3rd Qu.": quantile(ordered, 0.75),
			"Max.": ordered[-1],
		}
	else:
		table = {"Length": r_length(x), "Class": class_of(x), "Mode": mode_of(x)}
	return Tagged(table, SUMMARY_CLASS)

def _cell(v) -> str:
	if isinstance(v, float): return "%.4g" % v
	return str(v)

def format_table(table) -> str:
	table = unclass(table)
	if not table: return "< table of extent 0 >"
	names = list(table)
	cells = [_cell(table[k]) for k in names]
	width = max(map(len, names + cells))
	head = " ".join(k.rjust(width) for k in names)
	body = " ".join(c.rjust(width) for c in cells)
	return head + " \n" + body + " "
