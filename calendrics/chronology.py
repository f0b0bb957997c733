"""
# Calendar systems and the field combinations they resolve.

# A &Chronology owns a closed catalog of rules and units, and an ordered sequence of
# merge steps. Each step is a function of the working state of a merge and the merge
# context returning a new state; steps never mutate the state they are given.
# The merge engine applies the steps in order, once per pass, until a pass
# produces no change.

# The ISO steps, in order:

# /clock hours/
	# AM/PM with the hour or clock hour of AM/PM and the clock hour of day produce
	# the hour of day.
# /time/
	# Any complete set of time-of-day fields produces the time.
# /months and years/
	# Quarter and month of quarter produce the month; era and year of era produce
	# the year.
# /date/
	# The first complete set of date fields, in precedence order, produces
	# the date.
# /week-based date/
	# The week-based-year, its week, and the day of week produce the date.
"""
from . import core
from . import units
from . import earth
from . import gregorian
from . import week
from . import rules
from . import types

class Chronology(object):
	"""
	# A calendar system.

	# [ Properties ]
	# /name/
		# The identifier of the calendar system; rules carry it as their `chronology`.
	# /rules/
		# The rule catalog in ordinal order.
	# /units/
		# The units the rules are measured in.
	# /steps/
		# The merge steps applied by each pass of a merge.
	"""

	def __init__(self, name, rules, units, steps):
		self.name = name
		self.rules = tuple(rules)
		self.units = tuple(units)
		self.steps = tuple(steps)
		self._index = {r.name: r for r in self.rules}

	def __repr__(self):
		return '<%s: %s>' % (self.__class__.__name__, self.name)

	def rule(self, name):
		"""
		# Retrieve the rule named &name.
		"""
		return self._index[name]

	def merge(self, state, context):
		"""
		# Apply each merge step to &state once.
		"""
		for step in self.steps:
			state = step(state, context)
		return state

def _local_date(context, y, m, d):
	# Strict contexts have already checked the fields against their absolute bounds.
	if not context.strict:
		y, m = divmod((y * 12) + (m - 1), 12)
		m += 1
		if d < 1:
			return types.LocalDate.from_epoch_day(gregorian.days_from_date((y, m, 1)) + d - 1)
	return types.LocalDate._checked(context.resolver(y, m, d))

def _local_time(state, context, nanoseconds):
	if context.strict:
		return state._replace(time=types.LocalTime.from_nano_of_day(nanoseconds))

	days, tod = earth.timeofday_from_nanoseconds(nanoseconds)
	state = state._replace(time=tuple.__new__(types.LocalTime, tod))
	if days:
		state = state.flow(units.Period.of(day=days))
	return state

def merge_clock_hours(state, context):
	"""
	# Normalize clock hours and AM/PM into the hour of day.
	"""
	chod = state.value(rules.clock_hour_of_day)
	if chod is not None:
		state = state.take(rules.clock_hour_of_day)
		state = state.produce(context, rules.hour_of_day, chod % earth.hours_in_day)

	ampm = state.value(rules.ampm_of_day)
	if ampm is None:
		return state

	hoap = state.value(rules.hour_of_ampm)
	if hoap is not None:
		state = state.take(rules.ampm_of_day, rules.hour_of_ampm)
		return state.produce(context, rules.hour_of_day, (ampm * earth.hours_in_ampm) + hoap)

	choap = state.value(rules.clock_hour_of_ampm)
	if choap is not None:
		state = state.take(rules.ampm_of_day, rules.clock_hour_of_ampm)
		hod = (ampm * earth.hours_in_ampm) + choap
		if hod == earth.hours_in_day:
			# Twelve PM is the midnight that ends the day.
			state = state.flow(units.Period.of(day=1))
			hod = 0
		return state.produce(context, rules.hour_of_day, hod)

	return state

def _fraction(state):
	# The finest sub-second field present, in nanoseconds.
	ns = state.value(rules.nano_of_second)
	if ns is not None:
		return ns, (rules.nano_of_second,)
	us = state.value(rules.micro_of_second)
	if us is not None:
		return us * earth.nanoseconds_in_microsecond, (rules.micro_of_second,)
	ms = state.value(rules.milli_of_second)
	if ms is not None:
		return ms * earth.nanoseconds_in_millisecond, (rules.milli_of_second,)
	return 0, ()

def merge_time(state, context):
	"""
	# Produce the time of day from the first complete set of fields present.
	"""
	if state.time is not None:
		return state

	v = state.value(rules.nano_of_day)
	if v is not None:
		return _local_time(state.take(rules.nano_of_day), context, v)

	v = state.value(rules.micro_of_day)
	if v is not None:
		return _local_time(state.take(rules.micro_of_day), context, v * earth.nanoseconds_in_microsecond)

	v = state.value(rules.milli_of_day)
	if v is not None:
		return _local_time(state.take(rules.milli_of_day), context, v * earth.nanoseconds_in_millisecond)

	v = state.value(rules.second_of_day)
	if v is not None:
		ns, used = _fraction(state)
		state = state.take(rules.second_of_day, *used)
		return _local_time(state, context, (v * earth.nanoseconds_in_second) + ns)

	v = state.value(rules.minute_of_day)
	if v is not None:
		used = (rules.minute_of_day,)
		s = state.value(rules.second_of_minute)
		ns = 0
		if s is not None:
			ns, fraction = _fraction(state)
			used += (rules.second_of_minute,) + fraction
		else:
			s = 0
		return _local_time(
			state.take(*used), context,
			earth.nanoseconds_from_timeofday(0, v, s, ns)
		)

	h = state.value(rules.hour_of_day)
	if h is not None:
		used = (rules.hour_of_day,)
		m = state.value(rules.minute_of_hour)
		s = ns = 0
		if m is not None:
			used += (rules.minute_of_hour,)
			s = state.value(rules.second_of_minute)
			if s is not None:
				ns, fraction = _fraction(state)
				used += (rules.second_of_minute,) + fraction
			else:
				s = 0
		else:
			m = 0
		return _local_time(
			state.take(*used), context,
			earth.nanoseconds_from_timeofday(h, m, s, ns)
		)

	return state

def merge_months_and_years(state, context):
	"""
	# Combine quarter and month-of-quarter into month-of-year, and era and year-of-era
	# into the year.
	"""
	qoy = state.value(rules.quarter_of_year)
	moq = state.value(rules.month_of_quarter)
	if qoy is not None and moq is not None:
		state = state.take(rules.quarter_of_year, rules.month_of_quarter)
		state = state.produce(context, rules.month_of_year, ((qoy - 1) * 3) + moq)

	era = state.value(rules.era)
	yoe = state.value(rules.year_of_era)
	if era is not None and yoe is not None:
		if context.strict:
			rules.year_of_era.check(yoe, state.fields)
		state = state.take(rules.era, rules.year_of_era)
		state = state.produce(context, rules.year, yoe if era == 1 else 1 - yoe)

	return state

def merge_date(state, context):
	"""
	# Produce the date from the first complete set of fields present; in precedence:
	# epoch-day, year-month-day, year and day-of-year, year with the aligned week of
	# the year and the day of week, and year-month with the aligned week of the month
	# and day of week.
	"""
	if state.date is not None:
		return state

	v = state.value(rules.epoch_day)
	if v is not None:
		return state.take(rules.epoch_day)._replace(date=types.LocalDate.from_epoch_day(v))

	y = state.value(rules.year)
	if y is None:
		return state

	m = state.value(rules.month_of_year)
	d = state.value(rules.day_of_month)
	if m is not None and d is not None:
		date = _local_date(context, y, m, d)
		return state.take(rules.year, rules.month_of_year, rules.day_of_month)._replace(date=date)

	doy = state.value(rules.day_of_year)
	if doy is not None:
		if context.strict:
			date = types.LocalDate.from_year_day(y, doy)
		else:
			date = types.LocalDate.from_epoch_day(gregorian.days_from_date((y, 1, 1)) + doy - 1)
		return state.take(rules.year, rules.day_of_year)._replace(date=date)

	dow = state.value(rules.day_of_week)
	if dow is None:
		return state

	woy = state.value(rules.week_of_year)
	if woy is not None:
		first = gregorian.days_from_date((y, 1, 1))
		days = week.next_or_same(first + ((woy - 1) * 7), dow)
		date = types.LocalDate.from_epoch_day(days)
		if context.strict and date.year != y:
			raise core.InvalidCalendarDate(y, None, days - first + 1)
		return state.take(rules.year, rules.week_of_year, rules.day_of_week)._replace(date=date)

	wom = state.value(rules.week_of_month)
	if m is not None and wom is not None:
		start = _local_date(context, y, m, 1)
		first = start.epoch_day
		days = week.next_or_same(first + ((wom - 1) * 7), dow)
		date = types.LocalDate.from_epoch_day(days)
		if context.strict and date[:2] != start[:2]:
			raise core.InvalidCalendarDate(y, m, days - first + 1)
		used = (rules.year, rules.month_of_year, rules.week_of_month, rules.day_of_week)
		return state.take(*used)._replace(date=date)

	return state

def merge_week_based_date(state, context):
	"""
	# Produce the date from the ISO week-date fields.

	# Strict contexts check the week against the number of weeks in the week-based-year;
	# lenient contexts allow the week and day to overflow into the neighboring years.
	"""
	if state.date is not None:
		return state

	wby = state.value(rules.week_based_year)
	wowby = state.value(rules.week_of_week_based_year)
	dow = state.value(rules.day_of_week)
	if wby is None or wowby is None or dow is None:
		return state

	if context.strict:
		date = types.LocalDate.from_week_date(wby, wowby, dow)
	else:
		date = types.LocalDate._checked(week.date_from_week_based(wby, wowby, dow))

	used = (rules.week_based_year, rules.week_of_week_based_year, rules.day_of_week)
	return state.take(*used)._replace(date=date)

iso = Chronology(
	rules.chronology_name,
	rules.catalog,
	units.catalog,
	(
		merge_clock_hours,
		merge_time,
		merge_months_and_years,
		merge_date,
		merge_week_based_date,
	)
)
