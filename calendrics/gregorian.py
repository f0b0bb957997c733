"""
# Proleptic Gregorian calendar functions and data.

# The leap year rule is applied indefinitely into the past and the future. This is
# historically inaccurate prior to 1582, but consistent with ISO-8601. Year zero exists
# and is a leap year; the year before it is `-1`.

# Days are counted from the epoch, 1970-01-01, which is day zero.
"""
import bisect
import itertools

from . import core

#: Number of years in a gregorian cycle.
years_in_cycle = 400

#: Number of days in a gregorian cycle. Cycles always start with a leap year.
days_in_cycle = 146097

#: Supported year range.
minimum_year = -999999999
maximum_year = 999999999

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

#: Finite map associating the names and abbreviations of the months with their number.
month_name_to_number = {
	month_names[i] : i + 1 for i in range(len(month_names))
}
month_name_to_number.update([
	(k[:3], v) for (k,v) in month_name_to_number.items()
])

#: Names of the eras; era zero precedes year one.
era_names = ("before current era", "current era")
era_abbreviations = ("bce", "ce")

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: The number of days preceding each month; the thirteenth entry is the length of the year.
month_starts = tuple(itertools.accumulate((0,) + calendar_year))
month_starts_leap = tuple(itertools.accumulate((0,) + calendar_leap))

def year_is_leap(y) -> bool:
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)

def year_length(y) -> int:
	return 366 if year_is_leap(y) else 365

def month_length(y, m) -> int:
	"""
	# The number of days in the month &m of the year &y.
	"""
	if m == 2:
		return 29 if year_is_leap(y) else 28
	return calendar_year[m-1]

def days_before_year(y):
	"""
	# The number of days between 0000-01-01 and the first day of the year &y.
	# Negative for years before zero.
	"""
	# Floored division counts the leap years in [0, y) for either sign of y.
	return (365 * y) + ((y + 3) // 4) - ((y + 99) // 100) + ((y + 399) // 400)

#: Days between 0000-01-01 and the epoch, 1970-01-01.
days_to_epoch = days_before_year(1970)

def day_of_year(date) -> int:
	"""
	# The one-based day of the year of the date, `(year, month, day)`.
	"""
	y, m, d = date
	starts = month_starts_leap if year_is_leap(y) else month_starts
	return starts[m-1] + d

def month_and_day(y, doy):
	"""
	# Identify the month and day-of-month of the day-of-year, &doy, in the year &y.

	# The day-of-year must be valid for the year.
	"""
	starts = month_starts_leap if year_is_leap(y) else month_starts
	m = bisect.bisect_left(starts, doy)
	return (m, doy - starts[m-1])

def date_from_day_of_year(y, doy):
	"""
	# Construct the date tuple for the day-of-year, &doy, of year &y.

	# Raises &core.InvalidCalendarDate when &doy does not exist in the year,
	# notably the 366th day of a common year.
	"""
	if doy < 1 or doy > year_length(y):
		raise core.InvalidCalendarDate(y, None, doy)
	return (y,) + month_and_day(y, doy)

def days_from_date(date):
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to the number
	# of days since the epoch.
	"""
	y, m, d = date
	return days_before_year(y) + day_of_year(date) - 1 - days_to_epoch

def date_from_days(days):
	"""
	# Convert the given days since the epoch into a Gregorian date in the common form:
	# (year, month, day).
	"""
	cycles, doc = divmod(days + days_to_epoch, days_in_cycle)

	# Underestimate the year of the cycle and walk forward; at most two steps.
	yoc = doc // 366
	while days_before_year(yoc + 1) <= doc:
		yoc += 1

	y = (cycles * years_in_cycle) + yoc
	return (y,) + month_and_day(y, doc - days_before_year(yoc) + 1)

def valid(date) -> bool:
	"""
	# Whether the date tuple identifies a day in the calendar.
	"""
	y, m, d = date
	return 1 <= m <= 12 and 1 <= d <= month_length(y, m)
