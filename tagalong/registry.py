"""
The dispatch registry: for each generic name, a table of methods keyed by
class tag, plus perhaps one default.

Resolution is deliberately simple-minded: exact tag, then default, then give up.
There is no chain of classes to walk and no second argument to consider.
Registering a method for a tag that already has one replaces it without comment,
just as redefining `summary.foo` at the console would.

All registration and look-up happens under one lock. The lock is let go
before a method runs, so methods are free to dispatch in their turn.
"""
from threading import Lock
from typing import Any, Callable, Optional
from .errors import UnknownGenericError, NoApplicableMethodError
from .tagged import class_of

Implementation = Callable[..., Any]

class Generic:
	""" One named operation. """
	default: Optional[Implementation]
	
	def __init__(self, name:str):
		self.name = name
		self._methods: dict[str, Implementation] = {}
		self.default = None
	
	def __repr__(self): return "<Generic %s>" % self.name
	
	def install(self, type_tag:str, impl:Implementation):
		self._methods[type_tag] = impl
	
	def lookup(self, type_tag:str) -> Implementation:
		try: return self._methods[type_tag]
		except KeyError:
			if self.default is None:
				raise NoApplicableMethodError(self.name, type_tag) from None
			return self.default
	
	def tags(self) -> list[str]:
		return sorted(self._methods)


class GenericFunction:
	"""
	A callable front-end for one generic in one registry.
	Calling it reads the class of the first argument and dispatches on that,
	which is all that `UseMethod` ever really did.
	"""
	def __init__(self, registry:"Registry", name:str):
		self._registry = registry
		self.name = name
	
	def __repr__(self): return "<GenericFunction %s>" % self.name
	
	def __call__(self, obj, *extra_args):
		return self._registry.call(self.name, obj, *extra_args)


class Registry:
	def __init__(self):
		self._generics: dict[str, Generic] = {}
		self._mutex = Lock()
	
	def __contains__(self, name:str) -> bool:
		return name in self._generics
	
	def _generic(self, name:str) -> Generic:
		# Caller holds the mutex.
		try: return self._generics[name]
		except KeyError: raise UnknownGenericError(name) from None
	
	def declare_generic(self, name:str) -> Generic:
		assert isinstance(name, str), name
		with self._mutex:
			try: return self._generics[name]
			except KeyError:
				generic = self._generics[name] = Generic(name)
				return generic
	
	def register_method(self, generic_name:str, type_tag:str, impl:Implementation):
		assert isinstance(type_tag, str), type_tag
		with self._mutex:
			self._generic(generic_name).install(type_tag, impl)
	
	def register_default(self, generic_name:str, impl:Implementation):
		with self._mutex:
			self._generic(generic_name).default = impl
	
	def dispatch(self, generic_name:str, obj, type_tag:str, *extra_args):
		with self._mutex:
			impl = self._generic(generic_name).lookup(type_tag)
		return impl(obj, *extra_args)
	
	def call(self, generic_name:str, obj, *extra_args):
		""" Dispatch on whatever class the object claims to be. """
		return self.dispatch(generic_name, obj, class_of(obj), *extra_args)
	
	def generic(self, name:str) -> GenericFunction:
		self.declare_generic(name)
		return GenericFunction(self, name)
	
	def method(self, generic_name:str, type_tag:str):
		""" Decorator form of `register_method`. """
		def decorate(fn:Implementation) -> Implementation:
			self.register_method(generic_name, type_tag, fn)
			return fn
		return decorate
	
	def default(self, generic_name:str):
		""" Decorator form of `register_default`. """
		def decorate(fn:Implementation) -> Implementation:
			self.register_default(generic_name, fn)
			return fn
		return decorate
	
	def methods(self, generic_name:str) -> list[str]:
		with self._mutex:
			return self._generic(generic_name).tags()
	
	def has_default(self, generic_name:str) -> bool:
		with self._mutex:
			return self._generic(generic_name).default is not None
	
	def generics(self) -> list[str]:
		with self._mutex:
			return sorted(self._generics)
