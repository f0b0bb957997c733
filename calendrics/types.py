"""
# Canonical temporal types.

# These are the fixed points that the merge engine resolves toward and the source of
# field derivations. All types are tuples; equality, ordering, and hashing are those of
# the tuple. Offset-carrying types order by their local fields, not by instant; use
# `epoch_second` to compare instants.

#!python
	d = types.LocalDate.of(2000, 2, 29)
	assert d.elapse(year=1) == types.LocalDate.of(2001, 2, 28)
	assert d.get(rules.day_of_year) == 60

# [ Elements ]
# /ZoneOffset/
	# A fixed displacement from UTC in seconds.
# /LocalDate/
	# A day of the proleptic Gregorian calendar.
# /LocalTime/
	# A time of day with nanosecond precision.
# /LocalDateTime/
	# A date paired with a time.
# /OffsetDate/
	# A date paired with an offset.
# /OffsetTime/
	# A time paired with an offset.
# /OffsetDateTime/
	# An instant expressed as a local date-time at an offset.
# /ZonedDateTime/
	# An &OffsetDateTime associated with the zone that selected its offset.
"""
from . import core
from . import units
from . import earth
from . import gregorian
from . import week
from . import rules
from . import resolvers

def _format_year(y):
	if y < 0:
		return '-%04d' % (-y,)
	elif y > 9999:
		return '+%d' % (y,)
	return '%04d' % (y,)

def _time_nanoseconds(p):
	# Nanoseconds of the time-of-day portion of a period.
	return earth.nanoseconds_from_timeofday(p.hours, p.minutes, p.seconds, p.nanoseconds)

class ZoneOffset(int):
	"""
	# The total seconds east of UTC; bounded to eighteen hours in either direction.
	"""
	__slots__ = ()

	def __new__(Class, seconds=0):
		rules.offset_seconds.check(seconds)
		return super().__new__(Class, seconds)

	@classmethod
	def of(Class, hours=0, minutes=0, seconds=0):
		"""
		# Construct from components; each component must have the same sign.

		#!python
			assert ZoneOffset.of(-5, -30) == -19800
		"""
		parts = (hours, minutes, seconds)
		if any(x > 0 for x in parts) and any(x < 0 for x in parts):
			raise ValueError("offset components must have the same sign: %r" % (parts,))
		if abs(minutes) > 59 or abs(seconds) > 59:
			raise ValueError("offset minutes and seconds must be within 59: %r" % (parts,))
		return Class((hours * 3600) + (minutes * 60) + seconds)

	@property
	def total_seconds(self) -> int:
		return int(self)

	def derive(self, rule):
		return rule.derive(None, None, self)

	def get(self, rule):
		v = self.derive(rule)
		if v is None:
			raise core.UnsupportedField(rule, self)
		return v

	def __str__(self):
		if self == 0:
			return 'Z'
		sign = '-' if self < 0 else '+'
		h, r = divmod(abs(int(self)), 3600)
		m, s = divmod(r, 60)
		if s:
			return '%s%02d:%02d:%02d' % (sign, h, m, s)
		return '%s%02d:%02d' % (sign, h, m)

	def __repr__(self):
		return "(ZoneOffset@'%s')" % (self,)

ZoneOffset.utc = ZoneOffset(0)

class Temporal(tuple):
	"""
	# Common field access of the canonical types.

	# Subclasses define &_state returning the `(date, time, offset)` triple that
	# field rules derive from.
	"""
	__slots__ = ()

	def _state(self):
		raise NotImplementedError

	def derive(self, rule):
		"""
		# The value of &rule or &None when the rule cannot be derived from this type.
		"""
		return rule.derive(*self._state())

	def get(self, rule):
		"""
		# The value of &rule.

		# [ Exceptions ]
		# /&.core.UnsupportedField/
			# When the type does not carry the state necessary to derive the rule.
		"""
		v = rule.derive(*self._state())
		if v is None:
			raise core.UnsupportedField(rule, self)
		return v

	def __repr__(self):
		return "(%s@'%s')" % (self.__class__.__name__, self)

class LocalDate(Temporal):
	"""
	# A `(year, month, day)` triple that identifies a real day of the proleptic
	# Gregorian calendar.
	"""
	__slots__ = ()

	@classmethod
	def of(Class, year, month, day):
		"""
		# Construct a validated date.

		# [ Exceptions ]
		# /&.core.InvalidField/
			# When a component is outside of its absolute range.
		# /&.core.InvalidCalendarDate/
			# When the day does not exist in the month; February 30th.
		"""
		rules.year.check(year)
		rules.month_of_year.check(month)
		rules.day_of_month.check(day)
		return tuple.__new__(Class, resolvers.strict(year, month, day))

	@classmethod
	def from_epoch_day(Class, days):
		"""
		# Construct the date that is &days after 1970-01-01.
		"""
		rules.epoch_day.check(days)
		return tuple.__new__(Class, gregorian.date_from_days(days))

	@classmethod
	def from_year_day(Class, year, day):
		"""
		# Construct the date from a year and its day-of-year.
		"""
		rules.year.check(year)
		rules.day_of_year.check(day)
		return tuple.__new__(Class, gregorian.date_from_day_of_year(year, day))

	@classmethod
	def from_week_date(Class, week_based_year, week_number, day_of_week):
		"""
		# Construct the date from its ISO week-date.
		"""
		rules.week_based_year.check(week_based_year)
		rules.week_of_week_based_year.check(week_number)
		rules.day_of_week.check(day_of_week)
		if week_number > week.weeks_in_week_based_year(week_based_year):
			raise core.InvalidField(
				rules.week_of_week_based_year, week_number, 1,
				week.weeks_in_week_based_year(week_based_year)
			)
		return Class._checked(week.date_from_week_based(week_based_year, week_number, day_of_week))

	@classmethod
	def _checked(Class, date):
		rules.year.check(date[0])
		return tuple.__new__(Class, date)

	@property
	def year(self) -> int:
		return self[0]

	@property
	def month(self) -> int:
		return self[1]

	@property
	def day(self) -> int:
		return self[2]

	@property
	def epoch_day(self) -> int:
		return gregorian.days_from_date(self)

	@property
	def day_of_week(self) -> int:
		return week.day_of_week(gregorian.days_from_date(self))

	@property
	def day_of_year(self) -> int:
		return gregorian.day_of_year(self)

	@property
	def is_leap(self) -> bool:
		return gregorian.year_is_leap(self[0])

	@property
	def length_of_month(self) -> int:
		return gregorian.month_length(self[0], self[1])

	@property
	def length_of_year(self) -> int:
		return gregorian.year_length(self[0])

	def _state(self):
		return (self, None, None)

	def _apply(self, period, resolver):
		if any(period[3:]):
			raise TypeError("dates can only be adjusted by years, months, and days")
		resolver = resolver or resolvers.previous_valid

		y, m, d = self
		if period.years or period.months:
			months = (y * 12) + (m - 1) + (period.years * 12) + period.months
			y, m = divmod(months, 12)
			rules.year.check(y)
			y, m, d = resolver(y, m + 1, d)
		if period.days:
			return self.__class__.from_epoch_day(gregorian.days_from_date((y, m, d)) + period.days)
		return self.__class__._checked((y, m, d))

	def elapse(self, resolver=None, **parts):
		"""
		# Construct the date that is the given quantity after this one.

		# Years and months are applied before days. When the resulting day-of-month
		# does not exist, &resolver decides the outcome; defaults to
		# &.resolvers.previous_valid.

		#!python
			assert LocalDate.of(2001, 1, 31).elapse(month=1) == LocalDate.of(2001, 2, 28)
		"""
		return self._apply(units.Period.of(**parts), resolver)

	def rollback(self, resolver=None, **parts):
		"""
		# Construct the date that is the given quantity before this one.
		"""
		return self._apply(-units.Period.of(**parts), resolver)

	def update(self, rule, value, resolver=None):
		"""
		# Construct a date with the field identified by &rule set to &value.

		# Fields of the same unit as the rule are preserved where possible;
		# updating the year of February 29th uses &resolver, &.resolvers.previous_valid
		# by default, to select a valid day.
		"""
		rule.check(value, self)
		resolver = resolver or resolvers.previous_valid
		y, m, d = self

		if rule is rules.year:
			return self._checked(resolver(value, m, d))
		elif rule is rules.year_of_era:
			y = value if y >= 1 else 1 - value
			return self._checked(resolver(y, m, d))
		elif rule is rules.era:
			if value == self.derive(rules.era):
				return self
			return self._checked(resolver(1 - y, m, d))
		elif rule is rules.month_of_year:
			return self._checked(resolver(y, value, d))
		elif rule is rules.quarter_of_year:
			return self._checked(resolver(y, ((value - 1) * 3) + ((m - 1) % 3) + 1, d))
		elif rule is rules.month_of_quarter:
			return self._checked(resolver(y, m - ((m - 1) % 3) + value - 1, d))
		elif rule is rules.day_of_month:
			return self.__class__.of(y, m, value)
		elif rule is rules.day_of_year:
			return self.__class__.from_year_day(y, value)
		elif rule is rules.epoch_day:
			return self.__class__.from_epoch_day(value)
		elif rule.unit in (units.day, units.week) and rule.range is not None:
			# Aligned and ISO weeks as well as the day of week move linearly.
			current = self.get(rule)
			days = (value - current) * rule.unit.equivalent(units.day)
			return self.__class__.from_epoch_day(self.epoch_day + days)
		elif rule is rules.week_based_year:
			w = min(self.get(rules.week_of_week_based_year), week.weeks_in_week_based_year(value))
			return self.__class__.from_week_date(value, w, self.day_of_week)

		raise core.UnsupportedField(rule, self)

	def __str__(self):
		return "%s-%02d-%02d" % (_format_year(self[0]), self[1], self[2])

class LocalTime(Temporal):
	"""
	# An `(hour, minute, second, nanosecond)` quadruple identifying a time of day.
	"""
	__slots__ = ()

	@classmethod
	def of(Class, hour, minute=0, second=0, nanosecond=0):
		rules.hour_of_day.check(hour)
		rules.minute_of_hour.check(minute)
		rules.second_of_minute.check(second)
		rules.nano_of_second.check(nanosecond)
		return tuple.__new__(Class, (hour, minute, second, nanosecond))

	@classmethod
	def from_nano_of_day(Class, nod):
		rules.nano_of_day.check(nod)
		return tuple.__new__(Class, earth.timeofday_from_nanoseconds(nod)[1])

	@classmethod
	def from_second_of_day(Class, sod, nanosecond=0):
		rules.second_of_day.check(sod)
		rules.nano_of_second.check(nanosecond)
		return Class.from_nano_of_day((sod * earth.nanoseconds_in_second) + nanosecond)

	@property
	def hour(self) -> int:
		return self[0]

	@property
	def minute(self) -> int:
		return self[1]

	@property
	def second(self) -> int:
		return self[2]

	@property
	def nanosecond(self) -> int:
		return self[3]

	@property
	def nano_of_day(self) -> int:
		return earth.nanoseconds_from_timeofday(*self)

	@property
	def second_of_day(self) -> int:
		return (self[0] * earth.seconds_in_hour) + (self[1] * earth.seconds_in_minute) + self[2]

	def _state(self):
		return (None, self, None)

	def _shift(self, period):
		if period.years or period.months:
			raise TypeError("times of day cannot be adjusted by years or months")
		nanoseconds = self.nano_of_day + _time_nanoseconds(period)
		days, tod = earth.timeofday_from_nanoseconds(nanoseconds)
		return (days + period.days, tuple.__new__(self.__class__, tod))

	def overflow(self, **parts):
		"""
		# Adjust the time by the given quantity returning the number of days crossed
		# along with the new time: `(days, time)`.

		#!python
			assert LocalTime.of(23).overflow(hour=2) == (1, LocalTime.of(1))
		"""
		return self._shift(units.Period.of(**parts))

	def elapse(self, **parts):
		"""
		# Adjust the time forward wrapping within the day.
		"""
		return self._shift(units.Period.of(**parts))[1]

	def rollback(self, **parts):
		return self._shift(-units.Period.of(**parts))[1]

	def update(self, rule, value):
		"""
		# Construct a time with the field identified by &rule set to &value.
		"""
		rule.check(value)
		if rule.range is None or rule.unit.equivalent(units.nanosecond) is None:
			raise core.UnsupportedField(rule, self)
		current = self.derive(rule)
		if current is None:
			raise core.UnsupportedField(rule, self)

		if rule is rules.clock_hour_of_day:
			value, current = value % 24, current % 24
		elif rule is rules.clock_hour_of_ampm:
			value, current = value % 12, current % 12

		nanoseconds = (value - current) * rule.unit.equivalent(units.nanosecond)
		return self._shift(units.Period.of(nanosecond=nanoseconds))[1]

	def __str__(self):
		h, m, s, ns = self
		if ns:
			if ns % 1000000 == 0:
				frac = '.%03d' % (ns // 1000000,)
			elif ns % 1000 == 0:
				frac = '.%06d' % (ns // 1000,)
			else:
				frac = '.%09d' % (ns,)
		else:
			frac = ''
		return '%02d:%02d:%02d%s' % (h, m, s, frac)

LocalTime.midnight = tuple.__new__(LocalTime, (0, 0, 0, 0))
LocalTime.noon = tuple.__new__(LocalTime, (12, 0, 0, 0))

class LocalDateTime(Temporal):
	"""
	# A `(date, time)` pair without an offset.
	"""
	__slots__ = ()

	@classmethod
	def of(Class, year, month, day, hour=0, minute=0, second=0, nanosecond=0):
		return Class.combine(
			LocalDate.of(year, month, day),
			LocalTime.of(hour, minute, second, nanosecond),
		)

	@classmethod
	def combine(Class, date, time):
		return tuple.__new__(Class, (date, time))

	@classmethod
	def from_local_epoch_second(Class, seconds, nanosecond=0):
		"""
		# Construct from the seconds since 1970-01-01T00:00:00 of the wall clock.
		"""
		days, sod = divmod(seconds, earth.seconds_in_day)
		return Class.combine(
			LocalDate.from_epoch_day(days),
			LocalTime.from_second_of_day(sod, nanosecond)
		)

	@property
	def date(self) -> LocalDate:
		return self[0]

	@property
	def time(self) -> LocalTime:
		return self[1]

	@property
	def local_epoch_second(self) -> int:
		"""
		# The seconds since 1970-01-01T00:00:00 of the wall clock; no offset is applied.
		"""
		return (self[0].epoch_day * earth.seconds_in_day) + self[1].second_of_day

	def _state(self):
		return (self[0], self[1], None)

	def _apply(self, period, resolver):
		days, t = self[1]._shift(
			units.Period.of(
				hour=period.hours, minute=period.minutes,
				second=period.seconds, nanosecond=period.nanoseconds
			)
		)
		d = self[0]._apply(
			units.Period.of(year=period.years, month=period.months, day=period.days + days),
			resolver
		)
		return self.combine(d, t)

	def elapse(self, resolver=None, **parts):
		"""
		# Construct the date-time that is the given quantity after this one.
		# Time-of-day quantities carry into the date.
		"""
		return self._apply(units.Period.of(**parts), resolver)

	def rollback(self, resolver=None, **parts):
		return self._apply(-units.Period.of(**parts), resolver)

	def __str__(self):
		return '%sT%s' % self

class OffsetDate(Temporal):
	"""
	# A `(date, offset)` pair.
	"""
	__slots__ = ()

	@classmethod
	def combine(Class, date, offset):
		return tuple.__new__(Class, (date, offset))

	@property
	def date(self) -> LocalDate:
		return self[0]

	@property
	def offset(self) -> ZoneOffset:
		return self[1]

	def _state(self):
		return (self[0], None, self[1])

	def __str__(self):
		return '%s%s' % self

class OffsetTime(Temporal):
	"""
	# A `(time, offset)` pair.
	"""
	__slots__ = ()

	@classmethod
	def combine(Class, time, offset):
		return tuple.__new__(Class, (time, offset))

	@property
	def time(self) -> LocalTime:
		return self[0]

	@property
	def offset(self) -> ZoneOffset:
		return self[1]

	def _state(self):
		return (None, self[0], self[1])

	def rebase(self, offset):
		"""
		# Express the same instant at another offset.

		# [ Returns ]
		# `(days, OffsetTime)` where days is the number of days the local time crossed.
		"""
		days, t = self[0].overflow(second=int(offset) - int(self[1]))
		return (days, self.combine(t, offset))

	def __str__(self):
		return '%s%s' % self

class OffsetDateTime(Temporal):
	"""
	# A `(datetime, offset)` pair identifying an instant.
	"""
	__slots__ = ()

	@classmethod
	def combine(Class, datetime, offset):
		return tuple.__new__(Class, (datetime, offset))

	@classmethod
	def of(Class, year, month, day, hour=0, minute=0, second=0, nanosecond=0, offset=ZoneOffset.utc):
		return Class.combine(
			LocalDateTime.of(year, month, day, hour, minute, second, nanosecond),
			offset,
		)

	@classmethod
	def from_epoch_second(Class, seconds, offset=ZoneOffset.utc, nanosecond=0):
		"""
		# Construct the date-time at &offset of the instant &seconds after the epoch.
		"""
		return Class.combine(
			LocalDateTime.from_local_epoch_second(seconds + int(offset), nanosecond),
			offset,
		)

	@property
	def datetime(self) -> LocalDateTime:
		return self[0]

	@property
	def date(self) -> LocalDate:
		return self[0][0]

	@property
	def time(self) -> LocalTime:
		return self[0][1]

	@property
	def offset(self) -> ZoneOffset:
		return self[1]

	@property
	def offset_date(self) -> OffsetDate:
		return OffsetDate.combine(self[0][0], self[1])

	@property
	def offset_time(self) -> OffsetTime:
		return OffsetTime.combine(self[0][1], self[1])

	@property
	def epoch_second(self) -> int:
		return self[0].local_epoch_second - int(self[1])

	def _state(self):
		return (self[0][0], self[0][1], self[1])

	def rebase(self, offset):
		"""
		# Express the same instant at another offset.
		"""
		if offset == self[1]:
			return self
		return self.from_epoch_second(self.epoch_second, offset, self[0][1][3])

	def __str__(self):
		return '%s%s' % self

class ZonedDateTime(Temporal):
	"""
	# An `(offset_datetime, zone)` pair; the offset is one that &zone permits for the
	# local date-time.
	"""
	__slots__ = ()

	@classmethod
	def combine(Class, offset_datetime, zone):
		return tuple.__new__(Class, (offset_datetime, zone))

	@classmethod
	def from_epoch_second(Class, seconds, zone, nanosecond=0):
		offset = zone.rules.offset_at(seconds)
		return Class.combine(OffsetDateTime.from_epoch_second(seconds, offset, nanosecond), zone)

	@classmethod
	def of(Class, datetime, zone, preferred=None):
		"""
		# Resolve the local &datetime in &zone.

		# When the local time is ambiguous, &preferred selects the offset if it is
		# valid, otherwise the earlier instant is used. When the local time falls
		# in a gap, it is moved forward by the length of the gap.
		"""
		local = datetime.local_epoch_second
		offsets = zone.rules.valid_offsets(local)
		if preferred is not None and preferred in offsets:
			offset = preferred
		elif offsets:
			offset = offsets[0]
		else:
			transition, offset = zone.rules.transition_after(local)
			before = zone.rules.offset_at(transition - 1)
			datetime = datetime.elapse(second=int(offset) - int(before))
		return Class.combine(OffsetDateTime.combine(datetime, offset), zone)

	@property
	def offset_datetime(self) -> OffsetDateTime:
		return self[0]

	@property
	def datetime(self) -> LocalDateTime:
		return self[0][0]

	@property
	def date(self) -> LocalDate:
		return self[0][0][0]

	@property
	def time(self) -> LocalTime:
		return self[0][0][1]

	@property
	def offset(self) -> ZoneOffset:
		return self[0][1]

	@property
	def zone(self):
		return self[1]

	@property
	def epoch_second(self) -> int:
		return self[0].epoch_second

	def _state(self):
		return (self[0][0][0], self[0][0][1], self[0][1])

	def __str__(self):
		return '%s[%s]' % self
