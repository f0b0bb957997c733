"""
# Field rules of the ISO chronology.

# A field rule describes a named calendrical quantity: the unit it counts, the unit it
# is *of*, and its bounds. The catalog is closed; each rule is a constant of this module
# and the per-rule behavior is selected from tables keyed by the rule's ordinal rather
# than by subclassing.

#!python
	assert rules.day_of_month.maximum == 31
	assert rules.day_of_month.smallest_maximum == 28
	assert rules.day_of_week.derive(date=(1970, 1, 1)) == 4

# [ Elements ]
# /catalog/
	# The rules of the ISO chronology in ordinal order.
# /derivations/
	# Functions computing a rule's value from canonical state, `(date, time, offset)`.
	# They return &None when the state is insufficient.
# /contextual_maxima/
	# Functions narrowing a rule's maximum using other values known to a context.
# /texts/
	# Full and short names of the values of textual rules.
"""
from . import core
from . import units
from . import earth
from . import gregorian
from . import week
from . import fields

chronology_name = 'ISO'

class FieldRule(tuple):
	"""
	# The static description of a field within a chronology.

	# Rules are immutable singletons ordered by their catalog ordinal.
	"""
	__slots__ = ()

	@property
	def ordinal(self) -> int:
		return self[0]

	@property
	def chronology(self) -> str:
		"""
		# The name of the chronology defining the rule.
		"""
		return self[1]

	@property
	def name(self) -> str:
		return self[2]

	@property
	def identifier(self) -> str:
		return self[1] + '.' + self[2]

	@property
	def unit(self) -> units.PeriodUnit:
		"""
		# The unit that the field counts.
		"""
		return self[3]

	@property
	def range(self):
		"""
		# The unit the field is *of*; &None for unbounded fields such as the year.
		"""
		return self[4]

	@property
	def minimum(self) -> int:
		return self[5]

	@property
	def smallest_maximum(self) -> int:
		"""
		# The largest value that is valid regardless of context.
		"""
		return self[6]

	@property
	def maximum(self) -> int:
		"""
		# The largest value the field can have in any context.
		"""
		return self[7]

	def __hash__(self):
		return hash((self[1], self[0]))

	def __str__(self):
		return self[2]

	def __repr__(self):
		return "(rule@'{0}')".format(self.identifier)

	def maximum_value(self, context=None) -> int:
		"""
		# The maximum value of the field given the other values known to &context.

		# [ Parameters ]
		# /context/
			# An object providing `derive(rule)`; usually a &fields.Fields instance
			# or a canonical temporal type. &None for the absolute maximum.
		"""
		if context is not None:
			narrow = contextual_maxima.get(self[0])
			if narrow is not None:
				m = narrow(context)
				if m is not None:
					return m
		return self[7]

	def valid(self, value, context=None) -> bool:
		return self[5] <= value <= self.maximum_value(context)

	def check(self, value, context=None):
		"""
		# Return &value if it is within the range of the rule, otherwise
		# raise &core.InvalidField.
		"""
		maximum = self.maximum_value(context)
		if not self[5] <= value <= maximum:
			raise core.InvalidField(self, value, self[5], maximum)
		return value

	def derive(self, date=None, time=None, offset=None):
		"""
		# Compute the field's value from canonical state.

		# [ Parameters ]
		# /date/
			# A `(year, month, day)` sequence.
		# /time/
			# An `(hour, minute, second, nanosecond)` sequence.
		# /offset/
			# The offset from UTC in seconds.

		# [ Returns ]
		# The value of the field or &None when it cannot be derived from the given state.
		"""
		return derivations[self[0]](date, time, offset)

	def field(self, value):
		"""
		# Construct a &fields.FieldValue of this rule.
		"""
		return fields.FieldValue(self, value)

	def text(self, value, style='full'):
		"""
		# The name of &value in the given &style, `'full'` or `'short'`. Fields
		# without textual representations are rendered as numbers.
		"""
		names = texts.get(self[0])
		if names is None or not self[5] <= value <= self[7]:
			return str(value)
		return names[style][value - self[5]]

	def parse_text(self, text):
		"""
		# Identify the value named by &text; &None if the text is not a name of this rule.
		"""
		names = texts.get(self[0])
		if names is None:
			return None
		text = text.strip().lower()
		for style in names.values():
			for i, name in enumerate(style):
				if name.lower() == text:
					return i + self[5]
		return None

catalog = []

def _rule(name, unit, range, minimum, maximum, smallest_maximum=None):
	if smallest_maximum is None:
		smallest_maximum = maximum
	assert minimum <= smallest_maximum <= maximum
	r = FieldRule((len(catalog), chronology_name, name, unit, range, minimum, smallest_maximum, maximum))
	catalog.append(r)
	return r

_nanoday = earth.nanoseconds_in_day
_min_year = gregorian.minimum_year
_max_year = gregorian.maximum_year

nano_of_second = _rule('nano_of_second', units.nanosecond, units.second, 0, 999999999)
nano_of_day = _rule('nano_of_day', units.nanosecond, units.day, 0, _nanoday - 1)
micro_of_second = _rule('micro_of_second', units.microsecond, units.second, 0, 999999)
micro_of_day = _rule('micro_of_day', units.microsecond, units.day, 0, (_nanoday // 1000) - 1)
milli_of_second = _rule('milli_of_second', units.millisecond, units.second, 0, 999)
milli_of_day = _rule('milli_of_day', units.millisecond, units.day, 0, (_nanoday // 1000000) - 1)
second_of_minute = _rule('second_of_minute', units.second, units.minute, 0, 59)
second_of_day = _rule('second_of_day', units.second, units.day, 0, earth.seconds_in_day - 1)
minute_of_hour = _rule('minute_of_hour', units.minute, units.hour, 0, 59)
minute_of_day = _rule('minute_of_day', units.minute, units.day, 0, earth.minutes_in_day - 1)
hour_of_ampm = _rule('hour_of_ampm', units.hour, units.twelve_hours, 0, 11)
clock_hour_of_ampm = _rule('clock_hour_of_ampm', units.hour, units.twelve_hours, 1, 12)
hour_of_day = _rule('hour_of_day', units.hour, units.day, 0, 23)
clock_hour_of_day = _rule('clock_hour_of_day', units.hour, units.day, 1, 24)
ampm_of_day = _rule('ampm_of_day', units.twelve_hours, units.day, 0, 1)
day_of_week = _rule('day_of_week', units.day, units.week, 1, 7)
day_of_month = _rule('day_of_month', units.day, units.month, 1, 31, 28)
day_of_year = _rule('day_of_year', units.day, units.year, 1, 366, 365)
epoch_day = _rule('epoch_day', units.day, None,
	gregorian.days_from_date((_min_year, 1, 1)),
	gregorian.days_from_date((_max_year, 12, 31)),
)
week_of_month = _rule('week_of_month', units.week, units.month, 1, 5, 4)
week_of_year = _rule('week_of_year', units.week, units.year, 1, 53)
week_of_week_based_year = _rule('week_of_week_based_year', units.week, units.week_based_year, 1, 53, 52)
week_based_year = _rule('week_based_year', units.week_based_year, None, _min_year, _max_year)
month_of_quarter = _rule('month_of_quarter', units.month, units.quarter, 1, 3)
quarter_of_year = _rule('quarter_of_year', units.quarter, units.year, 1, 4)
month_of_year = _rule('month_of_year', units.month, units.year, 1, 12)
year_of_era = _rule('year_of_era', units.year, units.era, 1, 1 - _min_year, _max_year)
year = _rule('year', units.year, None, _min_year, _max_year)
era = _rule('era', units.era, None, 0, 1)
offset_seconds = _rule('offset_seconds', units.second, None, -18 * 3600, 18 * 3600)

catalog = tuple(catalog)
del _nanoday

_by_name = {r.name: r for r in catalog}

def rule(name:str) -> FieldRule:
	"""
	# Retrieve the rule identified by &name.
	"""
	return _by_name[name]

# Derivations

def _from_time(f):
	def derive(date, time, offset):
		if time is None:
			return None
		return f(*time)
	return derive

def _from_date(f):
	def derive(date, time, offset):
		if date is None:
			return None
		return f(*date)
	return derive

def _offset(date, time, offset):
	if offset is None:
		return None
	return int(offset)

_nod = earth.nanoseconds_from_timeofday
_ymd = gregorian.days_from_date

derivations = {
	nano_of_second.ordinal: _from_time(lambda h, m, s, n: n),
	nano_of_day.ordinal: _from_time(_nod),
	micro_of_second.ordinal: _from_time(lambda h, m, s, n: n // 1000),
	micro_of_day.ordinal: _from_time(lambda h, m, s, n: _nod(h, m, s, n) // 1000),
	milli_of_second.ordinal: _from_time(lambda h, m, s, n: n // 1000000),
	milli_of_day.ordinal: _from_time(lambda h, m, s, n: _nod(h, m, s, n) // 1000000),
	second_of_minute.ordinal: _from_time(lambda h, m, s, n: s),
	second_of_day.ordinal: _from_time(lambda h, m, s, n: (h * 3600) + (m * 60) + s),
	minute_of_hour.ordinal: _from_time(lambda h, m, s, n: m),
	minute_of_day.ordinal: _from_time(lambda h, m, s, n: (h * 60) + m),
	hour_of_ampm.ordinal: _from_time(lambda h, m, s, n: h % 12),
	# Clock hours are never zero.
	clock_hour_of_ampm.ordinal: _from_time(lambda h, m, s, n: (h % 12) or 12),
	hour_of_day.ordinal: _from_time(lambda h, m, s, n: h),
	clock_hour_of_day.ordinal: _from_time(lambda h, m, s, n: h or 24),
	ampm_of_day.ordinal: _from_time(lambda h, m, s, n: h // 12),

	day_of_week.ordinal: _from_date(lambda y, m, d: week.day_of_week(_ymd((y, m, d)))),
	day_of_month.ordinal: _from_date(lambda y, m, d: d),
	day_of_year.ordinal: _from_date(lambda y, m, d: gregorian.day_of_year((y, m, d))),
	epoch_day.ordinal: _from_date(lambda y, m, d: _ymd((y, m, d))),
	week_of_month.ordinal: _from_date(lambda y, m, d: week.week_of_month(d)),
	week_of_year.ordinal: _from_date(
		lambda y, m, d: week.week_of_year(gregorian.day_of_year((y, m, d)))
	),
	week_of_week_based_year.ordinal: _from_date(
		lambda y, m, d: week.week_of_week_based_year((y, m, d))
	),
	week_based_year.ordinal: _from_date(lambda y, m, d: week.week_based_year((y, m, d))),
	month_of_quarter.ordinal: _from_date(lambda y, m, d: ((m - 1) % 3) + 1),
	quarter_of_year.ordinal: _from_date(lambda y, m, d: ((m - 1) // 3) + 1),
	month_of_year.ordinal: _from_date(lambda y, m, d: m),
	year_of_era.ordinal: _from_date(lambda y, m, d: y if y >= 1 else 1 - y),
	year.ordinal: _from_date(lambda y, m, d: y),
	era.ordinal: _from_date(lambda y, m, d: 1 if y >= 1 else 0),
	offset_seconds.ordinal: _offset,
}

# Contextual maxima

def _known(context, rule):
	# Only trust values within the absolute range of their rule.
	v = context.derive(rule)
	if v is None or not rule.minimum <= v <= rule.maximum:
		return None
	return v

def _day_of_month_maximum(context):
	moy = _known(context, month_of_year)
	if moy is None:
		return None
	if moy == 2:
		y = _known(context, year)
		if y is None:
			return 29
		return gregorian.month_length(y, 2)
	return gregorian.calendar_year[moy - 1]

def _day_of_year_maximum(context):
	y = _known(context, year)
	if y is None:
		return None
	return gregorian.year_length(y)

def _week_of_month_maximum(context):
	moy = _known(context, month_of_year)
	if moy == 2:
		y = _known(context, year)
		if y is not None and not gregorian.year_is_leap(y):
			return 4
	return None

def _week_of_week_based_year_maximum(context):
	wby = _known(context, week_based_year)
	if wby is None:
		return None
	return week.weeks_in_week_based_year(wby)

def _year_of_era_maximum(context):
	e = _known(context, era)
	if e is None:
		return None
	return _max_year if e == 1 else 1 - _min_year

contextual_maxima = {
	day_of_month.ordinal: _day_of_month_maximum,
	day_of_year.ordinal: _day_of_year_maximum,
	week_of_month.ordinal: _week_of_month_maximum,
	week_of_week_based_year.ordinal: _week_of_week_based_year_maximum,
	year_of_era.ordinal: _year_of_era_maximum,
}

# Text

def _styles(full, short):
	return {'full': tuple(full), 'short': tuple(short)}

texts = {
	month_of_year.ordinal: _styles(
		[x.capitalize() for x in gregorian.month_names],
		[x.capitalize() for x in gregorian.month_abbreviations],
	),
	day_of_week.ordinal: _styles(
		[x.capitalize() for x in week.weekday_names],
		[x.capitalize() for x in week.weekday_abbreviations],
	),
	ampm_of_day.ordinal: _styles(['AM', 'PM'], ['AM', 'PM']),
	quarter_of_year.ordinal: _styles(
		['1st quarter', '2nd quarter', '3rd quarter', '4th quarter'],
		['Q1', 'Q2', 'Q3', 'Q4'],
	),
	era.ordinal: _styles(
		[x.capitalize() for x in gregorian.era_names],
		[x.upper() for x in gregorian.era_abbreviations],
	),
}
