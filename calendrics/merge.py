"""
# Resolution of field sets into canonical temporal objects.

# The merge is a fold over an immutable &State: each pass applies the chronology's
# steps followed by the upward composition of resolved objects, and the fold stops
# when a pass produces the same state it was given. Remaining fields that can be
# derived from the resolved objects are then validated against them.

#!python
	from calendrics import merge, rules

	m = merge.merge([
		(rules.year, 2000),
		(rules.quarter_of_year, 1),
		(rules.month_of_quarter, 2),
		(rules.day_of_month, 29),
	])
	assert str(m.date) == '2000-02-29'

# [ Elements ]
# /Context/
	# The configuration of a merge: strictness and the date resolver.
# /strict/
	# The default context; inconsistencies raise exceptions.
# /lenient/
	# The context that carries out-of-range values into the overflow period and
	# reconciles conflicting objects.
# /Bag/
	# The input of a merge.
# /Merged/
	# The output of a merge.
# /limit/
	# The maximum number of passes a merge will perform.
"""
import logging
import collections

from . import core
from . import units
from . import rules
from . import fields
from . import resolvers
from . import types
from . import zone
from . import chronology

log = logging.getLogger(__name__)

limit = 100

class Context(collections.namedtuple('Context', ('strict', 'resolver'))):
	"""
	# The merge configuration.

	# [ Properties ]
	# /strict/
		# Whether inconsistencies raise exceptions or are reconciled.
	# /resolver/
		# The &.abstract.DateResolver used for year-month-day combinations.
		# Defaults to &.resolvers.strict for strict contexts and
		# &.resolvers.part_lenient otherwise.
	"""
	__slots__ = ()

	def __new__(Class, strict=True, resolver=None):
		if resolver is None:
			resolver = resolvers.strict if strict else resolvers.part_lenient
		return super().__new__(Class, bool(strict), resolver)

strict = Context(True)
lenient = Context(False)

class Bag(collections.namedtuple('Bag', ('fields', 'date', 'time', 'offset', 'time_offset', 'zone'))):
	"""
	# The decomposed input of a merge.

	# [ Properties ]
	# /fields/
		# The &fields.Fields to resolve.
	# /date/
		# An already resolved &types.LocalDate.
	# /time/
		# An already resolved &types.LocalTime.
	# /offset/
		# The &types.ZoneOffset of the date or date-time.
	# /time_offset/
		# The offset of an &types.OffsetTime; reconciled with &offset when both are present.
	# /zone/
		# A &zone.ZoneId.
	"""
	__slots__ = ()

	@classmethod
	def of(Class, *items):
		"""
		# Construct from field values, `(rule, value)` pairs, canonical temporal objects,
		# offsets, and zones.

		# [ Exceptions ]
		# /&.core.RuleConflict/
			# When the same rule or the same object slot is given different values.
		"""
		slots = dict(fields=fields.Fields.empty, date=None, time=None, offset=None, time_offset=None, zone=None)

		def put(slot, value):
			current = slots[slot]
			if current is not None and current != value:
				raise core.RuleConflict(None, current, value, "duplicate " + slot.replace('_', ' '))
			slots[slot] = value

		for item in items:
			if isinstance(item, fields.FieldValue):
				slots['fields'] = slots['fields'].with_field(item.rule, item.value)
			elif isinstance(item, types.ZoneOffset):
				put('offset', item)
			elif isinstance(item, zone.ZoneId):
				put('zone', item)
			elif isinstance(item, types.LocalDate):
				put('date', item)
			elif isinstance(item, types.LocalTime):
				put('time', item)
			elif isinstance(item, types.LocalDateTime):
				put('date', item.date)
				put('time', item.time)
			elif isinstance(item, types.OffsetDate):
				put('date', item.date)
				put('offset', item.offset)
			elif isinstance(item, types.OffsetTime):
				put('time', item.time)
				put('time_offset', item.offset)
			elif isinstance(item, types.OffsetDateTime):
				put('date', item.date)
				put('time', item.time)
				put('offset', item.offset)
			elif isinstance(item, types.ZonedDateTime):
				put('date', item.date)
				put('time', item.time)
				put('offset', item.offset)
				put('zone', item.zone)
			elif isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], rules.FieldRule):
				slots['fields'] = slots['fields'].with_field(item[0], item[1])
			else:
				raise TypeError("cannot merge object of type " + repr(type(item).__name__))

		return Class(**slots)

class State(collections.namedtuple('State', (
		'fields', 'consumed', 'date', 'time', 'offset', 'time_offset', 'zone', 'overflow',
	))):
	"""
	# The working state of a merge.

	# &fields holds the pending fields; rules are moved from &fields to &consumed
	# as they are used.
	"""
	__slots__ = ()

	@classmethod
	def from_bag(Class, bag):
		return Class(bag.fields, frozenset(), bag.date, bag.time, bag.offset, bag.time_offset, bag.zone, units.Period.zero)

	def value(self, rule):
		"""
		# The pending value of &rule or &None.
		"""
		return self.fields.derive(rule)

	def take(self, *used):
		"""
		# Mark the rules as consumed.
		"""
		return self._replace(fields=self.fields.without(*used), consumed=self.consumed.union(used))

	def flow(self, period):
		"""
		# Add &period to the overflow.
		"""
		return self._replace(overflow=self.overflow + period)

	def produce(self, context, rule, value):
		"""
		# Add a derived field to the pending fields.

		# If the rule already has a different pending value, strict contexts raise
		# &core.RuleConflict and lenient contexts keep the pending value.
		"""
		current = self.fields.derive(rule)
		if current is None:
			return self._replace(fields=self.fields.with_field(rule, value))
		if current != value:
			if context.strict:
				raise core.RuleConflict(rule, current, value)
			log.debug("discarding produced %s=%d in favor of %d", rule, value, current)
		return self

def _check_fields(state):
	for rule, value in state.fields.items():
		rule.check(value)

def _compose_offsets(state, context):
	# Reconcile the offset of an OffsetTime with that of the date.
	if state.time_offset is not None:
		if state.offset is None or state.offset == state.time_offset:
			state = state._replace(offset=state.time_offset, time_offset=None)
		elif context.strict:
			raise core.RuleConflict(
				None,
				types.OffsetDate.combine(state.date, state.offset) if state.date is not None else state.offset,
				types.OffsetTime.combine(state.time, state.time_offset),
				"offsets differ"
			)
		else:
			days, ot = types.OffsetTime.combine(state.time, state.time_offset).rebase(state.offset)
			log.debug("rebased %s to %s", types.OffsetTime.combine(state.time, state.time_offset), ot)
			state = state._replace(time=ot.time, time_offset=None)
			if days:
				state = state.flow(units.Period.of(day=days))

	v = state.value(rules.offset_seconds)
	if v is not None and state.offset is None:
		state = state.take(rules.offset_seconds)._replace(offset=types.ZoneOffset(v))

	return state

def _compose_zone(state, context):
	# Select or validate the offset of a date-time using the zone's rules.
	if state.zone is None or state.date is None or state.time is None:
		return state

	ldt = types.LocalDateTime.combine(state.date, state.time)
	zrules = state.zone.rules
	offsets = zrules.valid_offsets(ldt.local_epoch_second)

	if state.offset is None:
		if offsets:
			return state._replace(offset=offsets[0])
		if context.strict:
			raise core.RuleConflict(None, ldt, state.zone, "local date-time does not exist in the zone")
		zdt = types.ZonedDateTime.of(ldt, state.zone)
		log.debug("shifted %s out of a gap in %s", ldt, state.zone)
		return state._replace(date=zdt.date, time=zdt.time, offset=zdt.offset)

	if state.offset in offsets:
		return state

	odt = types.OffsetDateTime.combine(ldt, state.offset)
	if context.strict:
		raise core.RuleConflict(None, odt, state.zone, "offset is not valid in the zone")

	odt = odt.rebase(zrules.offset_at(odt.epoch_second))
	log.debug("rebased %s to the offset of %s", odt, state.zone)
	return state._replace(date=odt.date, time=odt.time, offset=odt.offset)

def compose(state, context):
	"""
	# Combine resolved objects: apply day overflow to the date when a time is present,
	# reconcile offsets, and resolve the offset of zoned date-times.
	"""
	if state.date is not None and state.time is not None and state.overflow.days:
		days = state.overflow.days
		state = state._replace(
			date=state.date.elapse(day=days),
			overflow=state.overflow - units.Period.of(day=days),
		)

	state = _compose_offsets(state, context)
	state = _compose_zone(state, context)
	return state

def cross_validate(state, context):
	"""
	# Consume pending fields that agree with the resolved objects.

	# Disagreeing fields raise &core.RuleConflict in strict contexts and remain
	# pending in lenient contexts.
	"""
	used = []
	for rule, value in state.fields.items():
		derived = rule.derive(state.date, state.time, state.offset)
		if derived is None:
			continue
		if derived == value:
			used.append(rule)
		elif context.strict:
			raise core.RuleConflict(rule, derived, value, "field contradicts the resolved value")
		else:
			log.debug("leaving %s=%d pending; resolved value is %d", rule, value, derived)

	if used:
		state = state.take(*used)
	return state

class Merged(collections.namedtuple('Merged', (
		'date', 'time', 'datetime',
		'offset', 'zone',
		'offset_date', 'offset_time', 'offset_datetime', 'zoned',
		'overflow', 'consumed', 'fields',
	))):
	"""
	# The result of a merge.

	# Objects that could not be resolved are &None. &overflow is the &units.Period
	# that normalization carried out of the resolved objects, &consumed is the set of
	# rules that were used, and &fields holds the rules that were not.
	"""
	__slots__ = ()

	@classmethod
	def from_state(Class, state):
		date, time, offset = state.date, state.time, state.offset
		datetime = odate = otime = odt = zoned = None

		if date is not None and time is not None:
			datetime = types.LocalDateTime.combine(date, time)
		if offset is not None:
			if date is not None:
				odate = types.OffsetDate.combine(date, offset)
			if time is not None:
				otime = types.OffsetTime.combine(time, offset)
			if datetime is not None:
				odt = types.OffsetDateTime.combine(datetime, offset)
				if state.zone is not None:
					zoned = types.ZonedDateTime.combine(odt, state.zone)

		return Class(
			date, time, datetime,
			offset, state.zone,
			odate, otime, odt, zoned,
			state.overflow, state.consumed, state.fields,
		)

	@property
	def complete(self) -> bool:
		"""
		# Whether every field was consumed.
		"""
		return not self.fields

	def derive(self, rule):
		"""
		# The value of &rule from the resolved objects or the pending fields.
		"""
		v = rule.derive(self.date, self.time, self.offset)
		if v is None:
			return self.fields.derive(rule)
		return v

	def get(self, rule):
		v = self.derive(rule)
		if v is None:
			raise core.UnsupportedField(rule, self)
		return v

def merge(bag, context=None, chronology=chronology.iso):
	"""
	# Resolve the fields and objects in &bag into canonical temporal objects.

	# [ Parameters ]
	# /bag/
		# A &Bag or an iterable of items accepted by &Bag.of.
	# /context/
		# The &Context to merge with; defaults to &strict.
	# /chronology/
		# The calendar system whose steps resolve the fields.

	# [ Returns ]
	# &Merged
	"""
	if context is None:
		context = strict
	if not isinstance(bag, Bag):
		bag = Bag.of(*bag)

	state = State.from_bag(bag)
	if context.strict:
		_check_fields(state)

	for count in range(limit):
		following = compose(chronology.merge(state, context), context)
		if following == state:
			break
		log.debug("pass %d consumed %s", count + 1, ', '.join(sorted(map(str, following.consumed - state.consumed))))
		state = following
	else:
		raise core.CalendricalError("merge did not reach a fixed point after %d passes" % (limit,))

	return Merged.from_state(cross_validate(state, context))
