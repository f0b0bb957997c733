"""
# Field values and immutable sets of them.

# A &FieldValue pairs a rule with a raw integer. The value is not validated when the
# pair is constructed; out of range values are representable so that lenient merges
# can carry them into overflow. &FieldValue.valid_value performs the check.

# &Fields is the context object used by rules to narrow their maximum: it maps rules
# to values and offers `derive(rule)`.
"""
import collections.abc

from . import core

class FieldValue(tuple):
	"""
	# A rule paired with a, possibly invalid, value.

	# Ordered by rule, then by value.
	"""
	__slots__ = ()

	def __new__(Class, rule, value):
		return tuple.__new__(Class, (rule, value))

	@property
	def rule(self):
		return self[0]

	@property
	def value(self) -> int:
		return self[1]

	def valid(self, context=None) -> bool:
		return self[0].valid(self[1], context)

	def valid_value(self, context=None) -> int:
		"""
		# The value of the field after checking it against the rule's bounds.

		# [ Exceptions ]
		# /&.core.InvalidField/
			# When the value is outside of the range permitted by &context.
		"""
		return self[0].check(self[1], context)

	def __lt__(self, ob):
		if not isinstance(ob, FieldValue):
			return NotImplemented
		return (self[0].ordinal, self[1]) < (ob[0].ordinal, ob[1])

	def __le__(self, ob):
		if not isinstance(ob, FieldValue):
			return NotImplemented
		return (self[0].ordinal, self[1]) <= (ob[0].ordinal, ob[1])

	def __gt__(self, ob):
		if not isinstance(ob, FieldValue):
			return NotImplemented
		return ob < self

	def __ge__(self, ob):
		if not isinstance(ob, FieldValue):
			return NotImplemented
		return ob <= self

	def __str__(self):
		return "{0}={1}".format(self[0].name, self[1])

	def __repr__(self):
		return "FieldValue({0!r}, {1!r})".format(self[0], self[1])

class Fields(collections.abc.Mapping):
	"""
	# An immutable mapping of rules to values; at most one value per rule.
	"""
	__slots__ = ('_map',)

	@classmethod
	def of(Class, *values):
		"""
		# Construct from &FieldValue instances or `(rule, value)` pairs.

		# [ Exceptions ]
		# /&.core.RuleConflict/
			# When a rule is given twice with different values.
		"""
		f = Class.empty
		for rule, value in values:
			f = f.with_field(rule, value)
		return f

	def __init__(self, mapping=()):
		self._map = dict(mapping)

	def __getitem__(self, rule):
		return self._map[rule]

	def __iter__(self):
		return iter(sorted(self._map, key=lambda r: r.ordinal))

	def __len__(self):
		return len(self._map)

	def __hash__(self):
		return hash(frozenset(self._map.items()))

	def __repr__(self):
		return "Fields.of({0})".format(
			', '.join(repr(v) for v in self.values_sequence())
		)

	def __str__(self):
		return '{' + ', '.join(str(v) for v in self.values_sequence()) + '}'

	def values_sequence(self):
		"""
		# The contents as &FieldValue instances in rule order.
		"""
		return [FieldValue(r, self._map[r]) for r in self]

	def with_field(self, rule, value):
		"""
		# Construct a new instance with &rule set to &value.

		# Setting a rule to the value it already has returns the instance itself.
		"""
		current = self._map.get(rule)
		if current is not None:
			if current == value:
				return self
			raise core.RuleConflict(rule, current, value)

		d = dict(self._map)
		d[rule] = value
		return self.__class__(d)

	def without(self, *rules):
		"""
		# Construct a new instance that lacks the given &rules.
		"""
		d = {k: v for k, v in self._map.items() if k not in rules}
		if len(d) == len(self._map):
			return self
		return self.__class__(d)

	def derive(self, rule):
		"""
		# The value of &rule if present; &None otherwise.

		# Contextual maxima use this to consult sibling fields.
		"""
		return self._map.get(rule)

	def get(self, rule):
		"""
		# The value of &rule.

		# [ Exceptions ]
		# /&.core.UnsupportedField/
			# When &rule is not present.
		"""
		v = self._map.get(rule)
		if v is None:
			raise core.UnsupportedField(rule, self)
		return v

Fields.empty = Fields()
