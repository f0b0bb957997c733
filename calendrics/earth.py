"""
# Data and functions regarding Earth-based units of time. (The earth day)

# Days are presumed to have exactly 86400 seconds; leap seconds are not represented.
"""
#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of hours in each half of the day.
hours_in_ampm = 12

minutes_in_day = minutes_in_hour * hours_in_day
seconds_in_hour = seconds_in_minute * minutes_in_hour
seconds_in_day = seconds_in_hour * hours_in_day

nanoseconds_in_microsecond = 1000
nanoseconds_in_millisecond = 1000000
nanoseconds_in_second = 1000000000
nanoseconds_in_minute = nanoseconds_in_second * seconds_in_minute
nanoseconds_in_hour = nanoseconds_in_minute * minutes_in_hour
nanoseconds_in_day = nanoseconds_in_hour * hours_in_day

def nanoseconds_from_timeofday(hour, minute, second=0, nanosecond=0):
	"""
	# Total nanoseconds since midnight of the time of day.

	# The components are not validated; excess quantities accumulate.
	"""
	return (
		(hour * nanoseconds_in_hour) +
		(minute * nanoseconds_in_minute) +
		(second * nanoseconds_in_second) +
		nanosecond
	)

def timeofday_from_nanoseconds(nod):
	"""
	# Split nanoseconds since midnight into `(days, (hour, minute, second, nanosecond))`.

	# Quantities exceeding a day, or preceding midnight, are reported in &days so that
	# the time of day is always valid.
	"""
	days, nod = divmod(nod, nanoseconds_in_day)
	hour, nod = divmod(nod, nanoseconds_in_hour)
	minute, nod = divmod(nod, nanoseconds_in_minute)
	second, nanosecond = divmod(nod, nanoseconds_in_second)
	return (days, (hour, minute, second, nanosecond))
