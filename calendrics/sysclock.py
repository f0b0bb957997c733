"""
# Typed System Clock access.
"""
import time

from . import earth
from . import types
from . import zone

def _real_clock_read(time_ns=time.time_ns):
	# (epoch_second, nanosecond)
	return divmod(time_ns(), earth.nanoseconds_in_second)

def instant() -> types.OffsetDateTime:
	"""
	# Get the current instant according to the system's real clock at UTC.
	"""
	s, ns = _real_clock_read()
	return types.OffsetDateTime.from_epoch_second(s, types.ZoneOffset.utc, ns)

def now(tz=None) -> types.ZonedDateTime:
	"""
	# Get the current date-time in the zone &tz; defaults to &zone.ZoneId.local.
	"""
	if tz is None:
		tz = zone.ZoneId.local()
	s, ns = _real_clock_read()
	return types.ZonedDateTime.from_epoch_second(s, tz, ns)

def today(tz=None) -> types.LocalDate:
	return now(tz).date
