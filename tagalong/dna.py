"""
MyDNASeq: the running example of a home-made class.
It is nothing but a named list with a label on it.
"""
from collections import Counter
from .console import Console
from .registry import Registry
from .stats import SUMMARY_CLASS
from .tagged import Tagged

DNA_CLASS = "MyDNASeq"

def new_dna_seq(name:str, sequence:str) -> Tagged:
	return Tagged({"name": name, "sequence": sequence}, DNA_CLASS)

def dna_length(x, *_):
	return len(x["sequence"])

def dna_print(x, console:Console):
	console.cat("MyDNASeq object:", x["name"])
	console.cat("Sequence:", x["sequence"])
	return x

def dna_summary(x, *_):
	counts = Counter(x["sequence"])
	return Tagged({ch: counts[ch] for ch in sorted(counts)}, SUMMARY_CLASS)

def install(registry:Registry, console:Console):
	registry.register_method("length", DNA_CLASS, dna_length)
	registry.register_method("print", DNA_CLASS, lambda x, *_: dna_print(x, console))
	registry.register_method("summary", DNA_CLASS, dna_summary)
