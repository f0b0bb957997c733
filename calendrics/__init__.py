"""
[ About ]
---------

calendrics is a calendrical field model for the proleptic Gregorian calendar. Dates and
times are described as sets of *fields*, such as the year, the month-of-year, or the
day-of-week, each governed by a *rule* stating the field's unit, range, and bounds. A
*merge* resolves any set of fields into the canonical types: &.types.LocalDate,
&.types.LocalTime, and their combinations with offsets and zones.

Calendar Support:

	- Proleptic Gregorian, ISO-8601 weeks

calendrics' APIs are *not* compatible with the standard library's datetime module.

[ Fields ]
----------

Rules are constants of &.rules and derive their values from canonical types.

#!/pl/python
	from calendrics import rules, types

	d = types.LocalDate.of(2005, 1, 1)
	assert d.get(rules.week_based_year) == 2004
	assert d.get(rules.week_of_week_based_year) == 53
	assert d.get(rules.day_of_week) == 6

The maximum of some rules depends on other fields.

#!/pl/python
	from calendrics import fields

	context = fields.Fields.of((rules.year, 1900), (rules.month_of_year, 2))
	assert rules.day_of_month.maximum_value(context) == 28

[ Merging ]
-----------

Field sets of any shape are resolved by &.merge.merge.

#!/pl/python
	from calendrics import merge

	m = merge.merge([
		(rules.year, 2000),
		(rules.day_of_year, 60),
		(rules.ampm_of_day, 1),
		(rules.clock_hour_of_ampm, 3),
	])
	assert str(m.datetime) == '2000-02-29T15:00:00'

A strict context, the default, raises &.core.CalendricalError subclasses for any
inconsistency. A lenient context normalizes out-of-range values, carrying the excess
into the overflow period of the result.

#!/pl/python
	m = merge.merge([(rules.hour_of_day, 25)], merge.lenient)
	assert m.time == types.LocalTime.of(1)
	assert m.overflow.days == 1

[ Text ]
--------

&.format parses ISO-8601 and RFC-1123 text into fields and merges them.

#!/pl/python
	from calendrics import format

	m = format.parse("Tue, 15 Nov 1994 08:12:31 GMT", 'rfc1123')
	assert str(m.offset_datetime) == '1994-11-15T08:12:31Z'
"""
