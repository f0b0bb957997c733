from .. import core
from .. import rules
from .. import resolvers
from .. import types

LocalDate = types.LocalDate
LocalTime = types.LocalTime
LocalDateTime = types.LocalDateTime
ZoneOffset = types.ZoneOffset

def test_zone_offset(test):
	test/ZoneOffset.of(5, 30) == 19800
	test/ZoneOffset.of(-5, -30) == -19800
	test/str(ZoneOffset.of(5, 30)) == '+05:30'
	test/str(ZoneOffset.of(-5, -30)) == '-05:30'
	test/str(ZoneOffset(3661)) == '+01:01:01'
	test/str(ZoneOffset.utc) == 'Z'
	test/ZoneOffset.utc.get(rules.offset_seconds) == 0

	with test/ValueError:
		ZoneOffset.of(1, -1)
	with test/core.InvalidField:
		ZoneOffset(19 * 3600)

def test_local_date_validation(test):
	test/LocalDate.of(2000, 2, 29) == (2000, 2, 29)

	with test/core.InvalidField as exc:
		LocalDate.of(2000, 13, 1)
	test/exc().rule % rules.month_of_year

	with test/core.InvalidCalendarDate:
		LocalDate.of(2023, 2, 29)
	with test/core.InvalidField:
		LocalDate.of(2023, 1, 32)
	with test/core.InvalidCalendarDate:
		LocalDate.from_year_day(2023, 366)

def test_local_date_properties(test):
	d = LocalDate.of(2000, 2, 29)
	test/d.year == 2000
	test/d.month == 2
	test/d.day == 29
	test/d.day_of_year == 60
	test/d.day_of_week == 2
	test/d.is_leap == True
	test/d.length_of_month == 29
	test/d.length_of_year == 366
	test/LocalDate.of(1970, 1, 1).epoch_day == 0
	test/LocalDate.of(1970, 1, 1).day_of_week == 4
	test/LocalDate.of(1969, 12, 25).day_of_week == 4

def test_local_date_construction(test):
	test/LocalDate.from_epoch_day(-1) == LocalDate.of(1969, 12, 31)
	test/LocalDate.from_year_day(2000, 366) == LocalDate.of(2000, 12, 31)
	test/LocalDate.from_week_date(2004, 53, 6) == LocalDate.of(2005, 1, 1)
	with test/core.InvalidField:
		LocalDate.from_week_date(2005, 53, 1)

def test_local_date_fields(test):
	d = LocalDate.of(2005, 1, 1)
	test/d.get(rules.week_based_year) == 2004
	test/d.get(rules.week_of_week_based_year) == 53
	test/d.derive(rules.hour_of_day) == None
	with test/core.UnsupportedField as exc:
		d.get(rules.hour_of_day)
	test/exc().rule % rules.hour_of_day

def test_local_date_elapse(test):
	test/LocalDate.of(2001, 1, 31).elapse(month=1) == LocalDate.of(2001, 2, 28)
	test/LocalDate.of(2001, 1, 31).elapse(resolvers.next_valid, month=1) == LocalDate.of(2001, 3, 1)
	test/LocalDate.of(2000, 2, 29).elapse(year=1) == LocalDate.of(2001, 2, 28)
	test/LocalDate.of(2000, 2, 29).elapse(year=4) == LocalDate.of(2004, 2, 29)
	test/LocalDate.of(2000, 12, 31).elapse(day=1) == LocalDate.of(2001, 1, 1)
	test/LocalDate.of(2000, 1, 1).elapse(week=2) == LocalDate.of(2000, 1, 15)
	test/LocalDate.of(2000, 1, 31).elapse(month=13, day=1) == LocalDate.of(2001, 3, 1)
	test/LocalDate.of(2000, 3, 1).rollback(day=1) == LocalDate.of(2000, 2, 29)
	test/LocalDate.of(2000, 3, 31).rollback(month=1) == LocalDate.of(2000, 2, 29)
	test/LocalDate.of(2000, 1, 1).rollback(month=1) == LocalDate.of(1999, 12, 1)

	with test/TypeError:
		LocalDate.of(2000, 1, 1).elapse(hour=1)

def test_local_date_update(test):
	d = LocalDate.of(2000, 2, 29)
	test/d.update(rules.year, 2001) == LocalDate.of(2001, 2, 28)
	test/d.update(rules.month_of_year, 4) == LocalDate.of(2000, 4, 29)
	test/d.update(rules.day_of_month, 1) == LocalDate.of(2000, 2, 1)
	test/d.update(rules.day_of_year, 1) == LocalDate.of(2000, 1, 1)
	test/d.update(rules.epoch_day, 0) == LocalDate.of(1970, 1, 1)

	# Thursday to the Monday of the same week.
	test/LocalDate.of(1970, 1, 1).update(rules.day_of_week, 1) == LocalDate.of(1969, 12, 29)

	m = LocalDate.of(2000, 5, 15)
	test/m.update(rules.quarter_of_year, 4) == LocalDate.of(2000, 11, 15)
	test/m.update(rules.month_of_quarter, 3) == LocalDate.of(2000, 6, 15)
	test/m.update(rules.week_of_month, 1) == LocalDate.of(2000, 5, 1)
	test/m.update(rules.era, 0) == LocalDate.of(-1999, 5, 15)

	with test/core.InvalidField:
		d.update(rules.day_of_month, 30)
	with test/core.UnsupportedField:
		d.update(rules.hour_of_day, 1)

def test_local_date_str(test):
	test/str(LocalDate.of(2000, 1, 2)) == '2000-01-02'
	test/str(LocalDate.of(-1, 1, 1)) == '-0001-01-01'
	test/str(LocalDate.of(12345, 1, 1)) == '+12345-01-01'
	test/repr(LocalDate.of(2000, 1, 2)) == "(LocalDate@'2000-01-02')"

def test_local_time(test):
	t = LocalTime.of(13, 30)
	test/t == (13, 30, 0, 0)
	test/t.second_of_day == (13 * 3600) + (30 * 60)
	test/LocalTime.from_nano_of_day(t.nano_of_day) == t
	test/LocalTime.from_second_of_day(3661, 5) == LocalTime.of(1, 1, 1, 5)

	with test/core.InvalidField:
		LocalTime.of(24)
	with test/core.InvalidField:
		LocalTime.from_nano_of_day(-1)

def test_local_time_arithmetic(test):
	test/LocalTime.of(23).overflow(hour=2) == (1, LocalTime.of(1))
	test/LocalTime.of(1).overflow(hour=-2) == (-1, LocalTime.of(23))
	test/LocalTime.of(0).rollback(minute=1) == LocalTime.of(23, 59)
	test/LocalTime.of(0).elapse(day=3, second=1) == LocalTime.of(0, 0, 1)
	with test/TypeError:
		LocalTime.of(0).elapse(month=1)

def test_local_time_update(test):
	t = LocalTime.of(13, 30)
	test/t.update(rules.hour_of_ampm, 0) == LocalTime.of(12, 30)
	test/t.update(rules.clock_hour_of_ampm, 12) == LocalTime.of(12, 30)
	test/t.update(rules.ampm_of_day, 0) == LocalTime.of(1, 30)
	test/t.update(rules.clock_hour_of_day, 24) == LocalTime.of(0, 30)
	test/t.update(rules.minute_of_day, 0) == LocalTime.of(0)
	test/t.update(rules.milli_of_second, 5) == LocalTime.of(13, 30, 0, 5000000)
	with test/core.UnsupportedField:
		t.update(rules.year, 2000)

def test_local_time_str(test):
	test/str(LocalTime.of(12, 30)) == '12:30:00'
	test/str(LocalTime.of(0, 0, 0, 500000000)) == '00:00:00.500'
	test/str(LocalTime.of(0, 0, 0, 1000)) == '00:00:00.000001'
	test/str(LocalTime.of(0, 0, 0, 1)) == '00:00:00.000000001'

def test_local_datetime(test):
	dt = LocalDateTime.of(2000, 2, 28)
	test/dt.elapse(hour=25) == LocalDateTime.of(2000, 2, 29, 1)
	test/dt.rollback(second=1) == LocalDateTime.of(2000, 2, 27, 23, 59, 59)
	test/LocalDateTime.of(1970, 1, 2).local_epoch_second == 86400
	test/LocalDateTime.from_local_epoch_second(-1) == LocalDateTime.of(1969, 12, 31, 23, 59, 59)
	test/str(LocalDateTime.of(2000, 1, 1, 12)) == '2000-01-01T12:00:00'
	test/dt.get(rules.day_of_year) == 59
	test/dt.get(rules.clock_hour_of_day) == 24

def test_offset_time(test):
	ot = types.OffsetTime.combine(LocalTime.of(23), ZoneOffset.utc)
	days, rebased = ot.rebase(ZoneOffset.of(2))
	test/days == 1
	test/rebased == types.OffsetTime.combine(LocalTime.of(1), ZoneOffset.of(2))
	test/str(rebased) == '01:00:00+02:00'
	test/rebased.get(rules.offset_seconds) == 7200

def test_offset_datetime(test):
	odt = types.OffsetDateTime.of(1970, 1, 1, 1, offset=ZoneOffset.of(1))
	test/odt.epoch_second == 0
	test/str(odt) == '1970-01-01T01:00:00+01:00'
	test/str(odt.rebase(ZoneOffset.utc)) == '1970-01-01T00:00:00Z'
	test/odt.rebase(ZoneOffset.of(1)) % odt

	west = types.OffsetDateTime.from_epoch_second(0, ZoneOffset.of(-5))
	test/str(west) == '1969-12-31T19:00:00-05:00'
	test/west.epoch_second == 0
	test/west.offset_date == types.OffsetDate.combine(LocalDate.of(1969, 12, 31), ZoneOffset.of(-5))
	test/west.offset_time.time == LocalTime.of(19)
	test/west.get(rules.offset_seconds) == -18000

	ns = types.OffsetDateTime.from_epoch_second(1, nanosecond=5)
	test/ns.time == LocalTime.of(0, 0, 1, 5)
	test/ns.rebase(ZoneOffset.of(1)).time == LocalTime.of(1, 0, 1, 5)
