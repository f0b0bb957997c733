"""
# Contention primitives for the calendrics tests. Provides &Test, &Contention, &Absurdity,
# and &Fate.

# Tests receive a &Test instance and state their expectations using the true division
# operator:

#!syntax/python
	def test_leap(test):
		test/gregorian.year_is_leap(2000) == True
		test/gregorian.year_is_leap(1900) != True

		with test/core.InvalidCalendarDate as exc:
			gregorian.date_from_day_of_year(1999, 366)
		test/exc().day == 366
"""
import builtins
import operator
import functools

class Absurdity(AssertionError):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
		'__lshift__': 'contains',
	}

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

	def __repr__(self):
		return '{0}({1!r}, {2!r}, {3!r}, inverse={4!r})'.format(
			self.__class__.__name__, self.operator, self.former, self.latter, self.inverse
		)

class Contention(object):
	"""
	# Contentions are objects used by &Test objects to provide assertions.
	# Contention instances are made by the true division operator of &Test instances.

	# True division, "/", is used as it has high operator precedence that allows assertion
	# expressions to be constructed using minimal syntax that lends to readable failure
	# conditions. Floor division constructs an inverted contention.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	def _contend(self, opname, check, ob):
		x = self.object
		if bool(check(x, ob)) == self.inverse:
			raise self.test.Absurdity(opname, x, ob, inverse=self.inverse)

	# Special cases for context manager exception traps.

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		test, x = self.test, self.object
		y = self.storage = val
		if isinstance(y, test.Fate):
			# Don't trap test Fates.
			return

		if not isinstance(y, x):
			raise self.test.Absurdity("isinstance", x, y)
		return True # Inhibit the raise.

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called.

		#!syntax/python
			test/core.InvalidField ^ (lambda: rules.year.check(10**10))
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

def _comparison(opname, check):
	def contend(self, ob):
		self._contend(opname, check, ob)
	contend.__name__ = opname
	return contend

for _opname, _check in [
		('__eq__', operator.eq),
		('__ne__', operator.ne),
		('__lt__', operator.lt),
		('__gt__', operator.gt),
		('__le__', operator.le),
		('__ge__', operator.ge),
		('__mod__', operator.is_),
		# Contend that the parameter is contained by the object.
		('__lshift__', operator.contains),
	]:
	setattr(Contention, _opname, _comparison(_opname, _check))
del _opname, _check
Contention.__hash__ = None

class Fate(BaseException):
	"""
	# The Fate of a test; raised to conclude a test early.
	"""

	test_fate_descriptors = {
		# Abstract, Impact
		'pass': ("passed", 1),
		'skip': ("skipped", 0),
		'fail': ("failed", -1),
	}

	def __init__(self, content, subtype='fail'):
		self.content = content
		self.subtype = subtype

	@property
	def impact(self):
		return self.test_fate_descriptors[self.subtype][1]

	@property
	def negative(self):
		"""
		# Whether the fate's effect should be considered undesirable.
		"""
		return self.impact < 0

class Test(object):
	"""
	# An object that manages an individual test and constructs &Contention instances
	# for it.

	# [ Properties ]
	# /identifier/
		# The name of the test function.
	# /subject/
		# The test function.
	"""
	__slots__ = ('subject', 'identifier',)

	# These referenced via Test instances to allow subclasses to override
	# the implementations.
	Absurdity = Absurdity
	Contention = Contention
	Fate = Fate

	def __init__(self, identifier, subject):
		self.identifier = identifier
		self.subject = subject

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __rtruediv__(self, object):
		return self.Contention(self, object)

	def __floordiv__(self, object):
		return self.Contention(self, object, True)

	def __rfloordiv__(self, object):
		return self.Contention(self, object, True)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args, inverse=True)

	def skip(self, condition):
		"""
		# Used by test subjects to skip the test given that the provided &condition is
		# &True.
		"""
		if condition:
			raise self.Fate(condition, subtype='skip')

	def fail(self, cause):
		raise self.Fate(cause, subtype='fail')
