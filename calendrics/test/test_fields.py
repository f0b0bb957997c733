from .. import core
from .. import rules
from .. import fields

def test_field_value(test):
	fv = fields.FieldValue(rules.day_of_month, 32)
	test/fv.rule % rules.day_of_month
	test/fv.value == 32
	test/str(fv) == 'day_of_month=32'
	# Out of range values are representable until checked.
	test/fv.valid() == False
	with test/core.InvalidField:
		fv.valid_value()

	test/fields.FieldValue(rules.day_of_month, 30).valid_value() == 30
	context = fields.Fields.of((rules.month_of_year, 4))
	with test/core.InvalidField:
		fields.FieldValue(rules.day_of_month, 31).valid_value(context)

def test_field_value_ordering(test):
	a = rules.hour_of_day.field(5)
	b = rules.day_of_month.field(1)
	c = rules.day_of_month.field(2)
	d = rules.year.field(-10)

	test/sorted([d, c, b, a]) == [a, b, c, d]
	test/(b < c) == True
	test/(d > a) == True
	test/(b <= b) == True

def test_fields_of(test):
	f = fields.Fields.of(
		(rules.year, 2000),
		rules.month_of_year.field(2),
		(rules.year, 2000),
	)
	test/len(f) == 2
	test/f[rules.year] == 2000
	test/f.derive(rules.month_of_year) == 2
	test/f.derive(rules.day_of_month) == None
	test/f << rules.year

def test_fields_conflict(test):
	f = fields.Fields.of((rules.year, 2000))
	with test/core.RuleConflict as exc:
		f.with_field(rules.year, 2001)
	test/exc().rule % rules.year
	test/exc().former == 2000
	test/exc().latter == 2001

	test/f.with_field(rules.year, 2000) % f

def test_fields_immutable(test):
	f = fields.Fields.of((rules.year, 2000), (rules.month_of_year, 2))
	g = f.without(rules.year)
	test/len(f) == 2
	test/len(g) == 1
	test/f.without(rules.day_of_month) % f

	h = g.with_field(rules.day_of_month, 1)
	test/len(g) == 1
	test/len(h) == 2

def test_fields_order_and_equality(test):
	a = fields.Fields.of((rules.year, 2000), (rules.hour_of_day, 1))
	b = fields.Fields.of((rules.hour_of_day, 1), (rules.year, 2000))
	test/a == b
	test/hash(a) == hash(b)
	test/list(a) == [rules.hour_of_day, rules.year]
	test/a.values_sequence() == [rules.hour_of_day.field(1), rules.year.field(2000)]
	test/str(a) == '{hour_of_day=1, year=2000}'
	test/fields.Fields.empty == fields.Fields()

def test_fields_get(test):
	f = fields.Fields.of((rules.year, 2000))
	test/f.get(rules.year) == 2000
	with test/core.UnsupportedField as exc:
		f.get(rules.month_of_year)
	test/exc().rule % rules.month_of_year
	test/exc().subject % f
