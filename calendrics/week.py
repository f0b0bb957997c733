"""
# Week based measures of time: days of seven.

# Weekdays are numbered according to ISO-8601: Monday is `1` and Sunday is `7`.
# Week-based-years are ISO-8601 week numbering years: weeks start on Monday and the
# first week of the year is the one containing the first Thursday, or, equivalently,
# the fourth of January.
"""
from . import gregorian

#: English names of the days of the week; Monday first.
weekday_names = (
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
	'sunday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = (
	'mon', 'tue', 'wed', 'thu', 'fri', 'sat', 'sun',
)

monday = 1
thursday = 4
sunday = 7

def day_of_week(days):
	"""
	# Derive the ISO day of week from the number of days since the epoch.
	# The epoch, 1970-01-01, was a Thursday.
	"""
	# Python's modulo is floored, so negative day counts select the correct
	# weekday without shifting them into the positive range first.
	return ((days + 3) % days_in_week) + 1

def next_or_same(days, dow):
	"""
	# The first day at or after &days that falls on the weekday &dow.
	"""
	return days + ((dow - day_of_week(days)) % days_in_week)

def previous_or_same(days, dow):
	"""
	# The last day at or before &days that falls on the weekday &dow.
	"""
	return days - ((day_of_week(days) - dow) % days_in_week)

def week_of_month(dom):
	"""
	# The aligned week of the month; days one through seven are the first week.
	"""
	return ((dom - 1) // days_in_week) + 1

def week_of_year(doy):
	"""
	# The aligned week of the year; days one through seven are the first week.
	"""
	return ((doy - 1) // days_in_week) + 1

def week_one(wby):
	"""
	# The day, since the epoch, of the Monday that starts the first week of the
	# week-based-year &wby.
	"""
	jan4 = gregorian.days_from_date((wby, 1, 4))
	return previous_or_same(jan4, monday)

def weeks_in_week_based_year(wby):
	"""
	# The number of weeks in the week-based-year: 53 when it starts on a Thursday,
	# or on a Wednesday of a leap year, and 52 otherwise.
	"""
	dow = day_of_week(gregorian.days_from_date((wby, 1, 1)))
	if dow == thursday or (dow == thursday - 1 and gregorian.year_is_leap(wby)):
		return 53
	return 52

def week_based_year(date):
	"""
	# The ISO week-based-year of the date tuple, `(year, month, day)`.
	"""
	y, m, d = date
	if m == 1 and d < 4:
		dow = day_of_week(gregorian.days_from_date(date))
		if dow > d + 3:
			# Before the Thursday of the week; the week belongs to the prior year.
			return y - 1
	elif m == 12 and d > 28:
		dow = day_of_week(gregorian.days_from_date(date))
		if dow <= d % days_in_week:
			return y + 1
	return y

def week_of_week_based_year(date):
	"""
	# The ISO week number of the date tuple, `(year, month, day)`.
	"""
	days = gregorian.days_from_date(date)
	return ((days - week_one(week_based_year(date))) // days_in_week) + 1

def date_from_week_based(wby, week, dow):
	"""
	# The date tuple identified by the week-based-year, week, and day of week.

	# The arithmetic is linear: weeks beyond the last week of &wby and days outside
	# `1` through `7` overflow into the neighboring weeks. Callers are responsible for
	# validating the fields when overflow is not desired.
	"""
	days = week_one(wby) + ((week - 1) * days_in_week) + (dow - 1)
	return gregorian.date_from_days(days)
