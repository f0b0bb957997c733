"""
# Units of time and the &Period quantity built from them.

# Units are defined in terms of a smaller unit and a multiplier, much like a time context
# defines `hour` as a fraction of `day`. Units without a fixed definition are *basic*;
# their real length depends on the calendar: months, days subject to zone transitions,
# week-based-years, and eras.

#!python
	assert units.year.equivalent(units.month) == 12
	assert units.month.equivalent(units.day) is None
	assert units.Period.of(day=1) + units.Period.of(hour=3) == units.Period.of(day=1, hour=3)

# [ Elements ]
# /catalog/
	# All units ordered by magnitude. The position of a unit is its ordinal.
# /unit/
	# Retrieve a unit by its name.
"""
import fractions
import functools

class PeriodUnit(tuple):
	"""
	# A named unit of time measurement.

	# Instances are constructed once by this module and compared by their ordinal.
	"""
	__slots__ = ()

	@property
	def ordinal(self) -> int:
		return self[0]

	@property
	def name(self) -> str:
		return self[1]

	@property
	def quantity(self):
		"""
		# The number of &base units in this unit; &None for basic units.
		"""
		return self[2]

	@property
	def base(self):
		"""
		# The smaller &PeriodUnit this unit is defined in terms of.
		"""
		return self[3]

	@property
	def basic(self) -> bool:
		return self[3] is None

	def __str__(self):
		return self[1]

	def __repr__(self):
		return "(unit@{0!r})".format(self[1])

	def __hash__(self):
		return hash(self[0])

	def __eq__(self, ob):
		return isinstance(ob, PeriodUnit) and self[0] == ob[0]

	def __ne__(self, ob):
		return not self.__eq__(ob)

	def equivalent_period(self):
		"""
		# The definition of the unit as a pair, `(quantity, base)`, or &None when basic.
		"""
		if self[3] is None:
			return None
		return (self[2], self[3])

	@property
	def estimated_duration(self) -> fractions.Fraction:
		"""
		# The approximate length of the unit in seconds.
		"""
		return estimates[self[0]]

	def equivalent(self, smaller):
		"""
		# The whole number of &smaller units in one of these, or &None if the definitions
		# of this unit never reach &smaller.
		"""
		return _compose(self, smaller)

@functools.lru_cache()
def _compose(unit, target):
	count = 1
	while unit is not None:
		if unit == target:
			return count
		if unit.base is None:
			break
		count *= unit.quantity
		unit = unit.base
	return None

def _define(name, quantity=None, base=None):
	u = PeriodUnit((len(catalog), name, quantity, base))
	catalog.append(u)
	return u

catalog = []

nanosecond = _define('nanosecond')
microsecond = _define('microsecond', 1000, nanosecond)
millisecond = _define('millisecond', 1000, microsecond)
second = _define('second', 1000, millisecond)
minute = _define('minute', 60, second)
hour = _define('hour', 60, minute)
twelve_hours = _define('twelve_hours', 12, hour)
twenty_four_hours = _define('twenty_four_hours', 24, hour)
day = _define('day')
week = _define('week', 7, day)
month = _define('month')
quarter = _define('quarter', 3, month)
week_based_year = _define('week_based_year')
year = _define('year', 12, month)
decade = _define('decade', 10, year)
century = _define('century', 10, decade)
millennium = _define('millennium', 10, century)
era = _define('era')

catalog = tuple(catalog)

# Mean gregorian year: 365.2425 days.
_year_seconds = fractions.Fraction(31556952)
_day_seconds = fractions.Fraction(86400)

estimates = (
	fractions.Fraction(1, 1000000000),
	fractions.Fraction(1, 1000000),
	fractions.Fraction(1, 1000),
	fractions.Fraction(1),
	fractions.Fraction(60),
	fractions.Fraction(3600),
	fractions.Fraction(12 * 3600),
	_day_seconds,
	_day_seconds,
	_day_seconds * 7,
	_year_seconds / 12,
	_year_seconds / 4,
	(_day_seconds * 729) / 2, # 364.5 days
	_year_seconds,
	_year_seconds * 10,
	_year_seconds * 100,
	_year_seconds * 1000,
	_year_seconds * 2000000000,
)

for _u in catalog:
	# Definitions must refer to a smaller unit; this rules out cycles.
	if _u.base is not None and not _u.base.ordinal < _u.ordinal:
		raise RuntimeError("unit %r is defined in terms of a larger unit" % (_u.name,))
del _u

_by_name = {u.name: u for u in catalog}

def unit(name:str) -> PeriodUnit:
	"""
	# Retrieve the &PeriodUnit identified by &name.
	"""
	return _by_name[name]

class Period(tuple):
	"""
	# An amount of time in years, months, days, hours, minutes, seconds, and nanoseconds.

	# Each field is kept independently; no normalization between fields is performed
	# as the relationship between days and months depends on the calendar.
	# Used by the merge engine to report overflow.
	"""
	__slots__ = ()

	fields = ('year', 'month', 'day', 'hour', 'minute', 'second', 'nanosecond')

	# Units accepted by &of along with the field and multiplier they map onto.
	_keywords = {
		'year': (0, 1),
		'month': (1, 1),
		'day': (2, 1),
		'hour': (3, 1),
		'minute': (4, 1),
		'second': (5, 1),
		'nanosecond': (6, 1),
		'decade': (0, 10),
		'century': (0, 100),
		'millennium': (0, 1000),
		'quarter': (1, 3),
		'week': (2, 7),
		'millisecond': (6, 1000000),
		'microsecond': (6, 1000),
	}

	@classmethod
	def of(Class, **parts):
		"""
		# Construct a period from keywords named after &PeriodUnit names.

		#!python
			p = Period.of(week=1, hour=2)
			assert p.days == 7
		"""
		values = [0] * 7
		for name, quantity in parts.items():
			try:
				index, multiplier = Class._keywords[name]
			except KeyError:
				raise TypeError("unsupported period unit: " + repr(name))
			values[index] += quantity * multiplier
		return tuple.__new__(Class, values)

	@property
	def years(self):
		return self[0]

	@property
	def months(self):
		return self[1]

	@property
	def days(self):
		return self[2]

	@property
	def hours(self):
		return self[3]

	@property
	def minutes(self):
		return self[4]

	@property
	def seconds(self):
		return self[5]

	@property
	def nanoseconds(self):
		return self[6]

	def is_zero(self) -> bool:
		return not any(self)

	def __add__(self, ob):
		if not isinstance(ob, Period):
			return NotImplemented
		return tuple.__new__(Period, [x + y for x, y in zip(self, ob)])

	def __neg__(self):
		return tuple.__new__(Period, [-x for x in self])

	def __sub__(self, ob):
		if not isinstance(ob, Period):
			return NotImplemented
		return self + (-ob)

	def __bool__(self):
		return not self.is_zero()

	def __repr__(self):
		parts = ', '.join([
			'{0}={1}'.format(k, v) for k, v in zip(self.fields, self) if v
		])
		return "Period.of({0})".format(parts)

	def __str__(self):
		# ISO-8601 duration form.
		y, mo, d, h, mi, s, ns = self
		if not any(self):
			return 'PT0S'
		date = ''.join([
			'{0}{1}'.format(v, c) for v, c in ((y, 'Y'), (mo, 'M'), (d, 'D')) if v
		])
		time = ''.join([
			'{0}{1}'.format(v, c) for v, c in ((h, 'H'), (mi, 'M')) if v
		])
		if s or ns:
			total = s * 1000000000 + ns
			sign = '-' if total < 0 else ''
			whole, frac = divmod(abs(total), 1000000000)
			if frac:
				time += '{0}{1}.{2}S'.format(sign, whole, ('%09d' % frac).rstrip('0'))
			else:
				time += '{0}{1}S'.format(sign, whole)
		return 'P' + date + ('T' + time if time else '')

Period.zero = Period.of()
