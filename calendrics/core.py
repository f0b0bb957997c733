"""
# Exceptions raised by calendrics.

# Low-level derivations never raise; they return &None when a value cannot be derived.
# The classes here are raised by validation and by the merge engine at the point of
# detection and are not retried.

# [ Elements ]
# /CalendricalError/
	# Base class of every error raised by the package.
# /InvalidField/
	# A field's value is outside its rule's minimum and contextual maximum.
# /UnsupportedField/
	# A rule was queried against a subject that cannot provide it.
# /RuleConflict/
	# Two resolved values for the same quantity disagree.
# /InvalidCalendarDate/
	# A day-of-month or day-of-year does not exist in the given year.
# /ParseError/
	# Text did not match the structure of a format.
"""

class CalendricalError(ValueError):
	"""
	# Base class for calendrical errors.
	"""

class InvalidField(CalendricalError):
	"""
	# The value of a field was not within the valid range of its rule.

	# [ Properties ]
	# /rule/
		# The &.rules.FieldRule whose bounds were violated.
	# /value/
		# The offending value.
	# /minimum/
		# The rule's minimum.
	# /maximum/
		# The maximum in effect at the time of the check; possibly contextual.
	"""

	def __init__(self, rule, value, minimum, maximum):
		self.rule = rule
		self.value = value
		self.minimum = minimum
		self.maximum = maximum

	def __str__(self):
		return "{0} value {1} is outside of the valid range [{2}, {3}]".format(
			self.rule, self.value, self.minimum, self.maximum
		)

class UnsupportedField(CalendricalError):
	"""
	# The &subject cannot provide a value for &rule.
	"""

	def __init__(self, rule, subject):
		self.rule = rule
		self.subject = subject

	def __str__(self):
		return "{0} cannot be derived from {1!r}".format(self.rule, self.subject)

class RuleConflict(CalendricalError):
	"""
	# Two values describing the same quantity disagree.

	# &rule is &None when the conflict is between whole objects, such as offsets or dates,
	# rather than individual fields.
	"""

	def __init__(self, rule, former, latter, reason=None):
		self.rule = rule
		self.former = former
		self.latter = latter
		self.reason = reason

	def __str__(self):
		subject = 'values' if self.rule is None else str(self.rule)
		s = "conflicting {0}: {1!s} and {2!s}".format(subject, self.former, self.latter)
		if self.reason:
			s += '; ' + self.reason
		return s

class InvalidCalendarDate(CalendricalError):
	"""
	# The day does not exist in the identified month or year.

	# &month is &None when the day was identified by its day-of-year.
	"""

	def __init__(self, year, month, day):
		self.year = year
		self.month = month
		self.day = day

	def __str__(self):
		if self.month is None:
			return "day-of-year {0} does not exist in the year {1}".format(self.day, self.year)
		return "{0:04}-{1:02}-{2:02} is not a calendar date".format(self.year, self.month, self.day)

class ParseError(CalendricalError):
	"""
	# The text could not be split into fields according to the format.

	# The exception that interrupted the parse, if any, is the cause.
	"""

	def __init__(self, source, format=None):
		self.source = source
		self.format = format

	def __str__(self):
		if self.format is None:
			return "could not parse {0!r}".format(self.source)
		return "could not parse {0!r} as {1}".format(self.source, self.format)
