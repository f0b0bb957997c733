"""
# Format and parse date-time strings.

# Primarily this module exposes two functions: &parser and &formatter. Parsers split
# text into the items of a merge, field values and offsets, leaving the resolution of
# the fields to &.merge; formatters render resolved objects.

# While formatting can usually occur without error, parsing text can fail in two
# ways: the text may not have the structure of the format, &.core.ParseError, or the
# fields may not resolve, any other &.core.CalendricalError raised by the merge.

#!python
	m = format.parse("2004-W53-6T12:00:00+01:00")
	assert str(m.offset_datetime) == '2005-01-01T12:00:00+01:00'
"""
import functools

from . import core
from . import gregorian
from . import rules
from . import types
from . import merge

rfc1123 = "{day_of_week}, {day:02} {month} {year:04} {hour:02}:{minute:02}:{second:02} GMT"

models = {
	'rfc1123' : rfc1123,
}

aliases = {
	'http' : 'rfc1123',
	'rfc' : 'rfc1123',
	'iso' : 'iso8601',
}

utc_designations = ('z', 'gmt', 'ut', 'utc', 'zulu')

def parse_offset(s):
	"""
	# Parse an offset: `Z`, `+HH`, `+HHMM`, `+HH:MM`, or `+HH:MM:SS`.
	"""
	s = s.strip()
	if s.lower() in utc_designations:
		return types.ZoneOffset.utc

	sign = s[:1]
	if sign not in ('+', '-'):
		raise ValueError("offset must start with a sign: " + repr(s))
	digits = s[1:]
	if ':' in digits:
		parts = digits.split(':')
	else:
		parts = [digits[i:i+2] for i in range(0, len(digits), 2)]
	if not 1 <= len(parts) <= 3 or not all(len(x) == 2 and x.isdigit() for x in parts):
		raise ValueError("invalid offset: " + repr(s))

	h, m, sec = (list(map(int, parts)) + [0, 0])[:3]
	if sign == '-':
		return types.ZoneOffset.of(-h, -m, -sec)
	return types.ZoneOffset.of(h, m, sec)

def _split_offset(time):
	# Separate a trailing offset from the time of day.
	if time[-1:].lower() == 'z':
		return time[:-1], 'z'
	for i, c in enumerate(time):
		if c in '+-':
			return time[:i], time[i:]
	return time, None

def _parse_date(date):
	sign = 1
	if date[:1] in ('+', '-'):
		sign = -1 if date[0] == '-' else 1
		date = date[1:]

	parts = date.split('-')
	year = sign * int(parts[0])
	if len(parts) == 3 and parts[1][:1].lower() == 'w':
		return (
			(rules.week_based_year, year),
			(rules.week_of_week_based_year, int(parts[1][1:])),
			(rules.day_of_week, int(parts[2])),
		)
	elif len(parts) == 3:
		return (
			(rules.year, year),
			(rules.month_of_year, int(parts[1])),
			(rules.day_of_month, int(parts[2])),
		)
	elif len(parts) == 2 and len(parts[1]) == 3:
		return (
			(rules.year, year),
			(rules.day_of_year, int(parts[1])),
		)
	elif len(parts) == 2:
		return (
			(rules.year, year),
			(rules.month_of_year, int(parts[1])),
		)
	raise ValueError("unrecognized date: " + repr(date))

def _parse_time(time):
	time, offset = _split_offset(time)
	fraction = None
	if '.' in time:
		time, fraction = time.split('.', 1)
	elif ',' in time:
		time, fraction = time.split(',', 1)

	parts = time.split(':')
	if not 2 <= len(parts) <= 3:
		raise ValueError("unrecognized time: " + repr(time))
	items = [
		(rules.hour_of_day, int(parts[0])),
		(rules.minute_of_hour, int(parts[1])),
	]
	if len(parts) == 3:
		items.append((rules.second_of_minute, int(parts[2])))
		if fraction is not None:
			if not fraction.isdigit() or len(fraction) > 9:
				raise ValueError("invalid fraction of a second: " + repr(fraction))
			items.append((rules.nano_of_second, int(fraction.ljust(9, '0'))))
	elif fraction is not None:
		raise ValueError("fraction requires seconds: " + repr(time))

	if offset is not None:
		items.append(parse_offset(offset))
	return items

def parse_iso8601(s):
	"""
	# Split an ISO-8601 string into merge items.

	# Calendar dates, `2000-02-29`, ordinal dates, `2000-060`, and week dates,
	# `2004-W53-6`, optionally followed by `T` and a time with an optional offset.
	# Text without a date must start with `T` or contain a colon.
	"""
	s = s.strip()
	if 'T' in s or 't' in s:
		date, time = s.replace('t', 'T').split('T', 1)
	elif ':' in s:
		date, time = '', s
	else:
		date, time = s, ''

	items = []
	if date:
		items.extend(_parse_date(date))
	if time:
		items.extend(_parse_time(time))
	if not items:
		raise ValueError("empty date-time")
	return tuple(items)

def parse_rfc1123(s):
	"""
	# Split an RFC-1123 date, `Tue, 15 Nov 1994 08:12:31 GMT`, into merge items.

	# The day of week is included as a field so that the merge validates it.
	"""
	# Be loose with the comma; don't break if there's whitespace between the DOW and comma.
	comma = s.find(',')
	if comma == -1:
		raise ValueError('comma not found')
	dow = rules.day_of_week.parse_text(s[:comma])
	if dow is None:
		raise ValueError("invalid day of week: " + repr(s[:comma]))

	fields = s[comma+1:].strip().split()
	trail = fields[4:]
	day, month, year, time = fields[:4]
	moy = gregorian.month_name_to_number.get(month.lower())
	if moy is None:
		raise ValueError("invalid month: " + repr(month))
	hour, minute, second = time.split(':')

	if len(trail) > 1:
		raise ValueError('unexpected data at end of string')
	zone = trail[0] if trail else 'GMT'

	return (
		(rules.day_of_week, dow),
		(rules.year, int(year)),
		(rules.month_of_year, moy),
		(rules.day_of_month, int(day)),
		(rules.hour_of_day, int(hour)),
		(rules.minute_of_hour, int(minute)),
		(rules.second_of_minute, int(second)),
		parse_offset(zone),
	)

parsers = {
	'rfc1123': parse_rfc1123,
	'iso8601': parse_iso8601,
}

def _parse(fun, format):
	def EXCEPTION(src, fun = fun, format = format):
		try:
			return fun(src)
		except core.CalendricalError:
			raise
		except (ValueError, KeyError, IndexError) as e:
			raise core.ParseError(src, format = format) from e
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def parser(fmt, context=None, _deref = aliases.get):
	"""
	# Given a format identifier, return the function that can be used to parse
	# the formatted string into a &.merge.Merged instance.
	"""
	fmt = _deref(fmt, fmt)
	def parser_composition(x, parse = _parse(parsers[fmt], fmt)):
		return merge.merge(parse(x), context)
	return parser_composition

def parse(text, fmt='iso8601', context=None):
	"""
	# Parse and merge &text according to &fmt.
	"""
	return parser(fmt, context)(text)

def format_iso8601(ob):
	"""
	# Render a canonical type in ISO-8601.
	"""
	return str(ob)

def format_rfc1123(ob, _fmt = models['rfc1123'].format):
	"""
	# Render an instant in RFC-1123; the instant is expressed at UTC.
	"""
	if isinstance(ob, types.ZonedDateTime):
		ob = ob.offset_datetime
	if not isinstance(ob, types.OffsetDateTime):
		raise TypeError("RFC-1123 requires an instant")

	ob = ob.rebase(types.ZoneOffset.utc)
	(y, m, d), (h, mi, s, ns) = ob.datetime
	return _fmt(
		year = y, month = rules.month_of_year.text(m, 'short'), day = d,
		hour = h, minute = mi, second = s,
		day_of_week = rules.day_of_week.text(ob.get(rules.day_of_week), 'short'),
	)

formatters = {
	'rfc1123' : format_rfc1123,
	'iso8601' : format_iso8601,
}

def formatter(fmt, _deref = aliases.get):
	"""
	# Given a format identifier, return the function that can be used to format
	# the temporal object.
	"""
	return formatters[_deref(fmt, fmt)]
