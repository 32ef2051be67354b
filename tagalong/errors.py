"""
The two ways a look-up can fail.

Whatever an implementation raises on its own account is none of our business:
it reaches the caller of `dispatch` exactly as it was raised.
"""

class DispatchError(Exception):
	""" Something went wrong finding a method, as opposed to running one. """

class UnknownGenericError(DispatchError):
	def __init__(self, generic_name:str):
		super().__init__(generic_name)
		self.generic_name = generic_name
	def __str__(self):
		return "no generic function called %r" % self.generic_name

class NoApplicableMethodError(DispatchError):
	def __init__(self, generic_name:str, type_tag:str):
		super().__init__(generic_name, type_tag)
		self.generic_name, self.type_tag = generic_name, type_tag
	def __str__(self):
		pattern = "no applicable method for '%s' applied to an object of class \"%s\""
		return pattern % (self.generic_name, self.type_tag)
