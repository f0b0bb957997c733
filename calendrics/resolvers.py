"""
# Date resolution policies.

# A resolver receives a year, month-of-year, and day-of-month, where the day may exceed
# the length of the month, and returns a valid `(year, month, day)` tuple or raises
# &core.InvalidCalendarDate. The month is presumed to be within `1` and `12` and the
# day to be at least `1`; callers validate those bounds against the rules.

# [ Elements ]
# /strict/
	# Reject days that do not exist in the month.
# /previous_valid/
	# Clamp to the last day of the month.
# /next_valid/
	# Move to the first day of the following month.
# /part_lenient/
	# Carry the excess days into the following month.
"""
from . import core
from . import gregorian

def strict(year, month, day):
	if day > gregorian.month_length(year, month):
		raise core.InvalidCalendarDate(year, month, day)
	return (year, month, day)

def previous_valid(year, month, day):
	"""
	# Clamp the day to the last day of the month; February 30th becomes the 28th or 29th.
	"""
	return (year, month, min(day, gregorian.month_length(year, month)))

def next_valid(year, month, day):
	"""
	# Days beyond the end of the month select the first day of the next month.
	"""
	if day > gregorian.month_length(year, month):
		if month == 12:
			return (year + 1, 1, 1)
		return (year, month + 1, 1)
	return (year, month, day)

def part_lenient(year, month, day):
	"""
	# Excess days are added to the last day of the month; February 30th becomes
	# March 2nd or March 1st.
	"""
	length = gregorian.month_length(year, month)
	if day > length:
		days = gregorian.days_from_date((year, month, length)) + (day - length)
		return gregorian.date_from_days(days)
	return (year, month, day)
