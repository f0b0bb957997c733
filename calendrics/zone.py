"""
# Zone identifiers and the offset rules they select.

# Usage:

#!syntax/python
	from calendrics import zone
	z = zone.ZoneId.of("America/Los_Angeles")
	offset = z.rules.offset_at(0)

# [ Elements ]
# /FixedRules/
	# Rules of a zone that always uses the same offset.
# /TransitionRules/
	# An ordered sequence of transition times whose ranges correspond to a
	# particular offset.
# /ZoneId/
	# A named zone and its rules.
"""
import os
import bisect
import functools

from . import abstract
from . import tzif
from . import types

# Local times are at most this far from UTC; bounds the search for candidate offsets.
_reach = 18 * 3600

class FixedRules(object):
	"""
	# The rules of a zone with a single offset.
	"""
	__slots__ = ('offset',)

	def __init__(self, offset):
		self.offset = offset

	def __repr__(self):
		return '<%s: %s>' % (self.__class__.__name__, self.offset)

	def offset_at(self, epoch_second):
		return self.offset

	def valid_offsets(self, local_epoch_second):
		return (self.offset,)

	def transition_after(self, local_epoch_second):
		return None

class TransitionRules(object):
	"""
	# An ordered sequence of transition times whose ranges correspond to a
	# particular offset.

	# [ Properties ]
	# /transitions/
		# The instants, in seconds since the epoch, that the offsets change.
	# /offsets/
		# The &types.ZoneOffset that takes effect at the corresponding transition.
	# /designations/
		# The abbreviations of the offsets; such as UTC, GMT, and EST.
	# /default/
		# The offset used before the first transition.
	"""

	def __init__(self, transitions, offsets, designations, default, name):
		self.transitions = transitions
		self.offsets = offsets
		self.designations = designations
		self.default = default
		self.name = name

	def __repr__(self):
		return '<%s: %s[%d]>' % (
			self.__class__.__name__,
			self.name,
			len(self.transitions),
		)

	def find(self, epoch_second, search=bisect.bisect_right):
		"""
		# Get the index of the transition in effect at &epoch_second; `-1` when the
		# instant precedes every transition.
		"""
		return search(self.transitions, epoch_second) - 1

	def offset_at(self, epoch_second):
		"""
		# Get the appropriate offset in the zone for the given instant.
		# If the instant does not fall within a known range, the &default will be returned.
		"""
		idx = self.find(epoch_second)
		if idx < 0:
			return self.default
		return self.offsets[idx]

	def designation(self, epoch_second):
		idx = self.find(epoch_second)
		if idx < 0:
			return self.designations[0] if self.designations else None
		return self.designations[idx]

	def _candidates(self, local_epoch_second):
		start = max(self.find(local_epoch_second - _reach), 0)
		stop = self.find(local_epoch_second + _reach) + 1
		found = {self.offset_at(local_epoch_second - _reach)}
		found.update(self.offsets[start:stop])
		return found

	def valid_offsets(self, local_epoch_second):
		"""
		# The offsets that map the local time to an instant whose offset is the same.
		# Overlaps produce two offsets with the earlier instant's first; gaps produce none.
		"""
		valid = [
			o for o in self._candidates(local_epoch_second)
			if self.offset_at(local_epoch_second - o) == o
		]
		valid.sort(reverse=True)
		return tuple(valid)

	def transition_after(self, local_epoch_second):
		"""
		# The first transition whose new local time is after &local_epoch_second.
		"""
		idx = max(self.find(local_epoch_second - _reach), 0)
		for t, o in zip(self.transitions[idx:], self.offsets[idx:]):
			if t + o > local_epoch_second:
				return (t, o)
		return None

	@classmethod
	def from_tzif_data(Class, tzd, name=None):
		# Re-use prior created offsets.
		zb = functools.lru_cache(maxsize=None)(types.ZoneOffset)

		typs, transitions, leaps = tzd
		# Prefer the first standard time type as the offset preceding all transitions.
		default = next((x for x in typs if not x.tz_isdst), typs[0])

		return Class(
			[x[0] for x in transitions],
			[zb(x[1].tz_offset) for x in transitions],
			[x[1].tz_abbrev.decode('ascii') for x in transitions],
			zb(default.tz_offset),
			name,
		)

	@classmethod
	def from_file(Class, filepath, name=None):
		tzd = tzif.get_timezone_data(filepath)
		if tzd is None:
			raise ValueError("not a TZif file: " + repr(filepath))
		return Class.from_tzif_data(tzd, name=name or filepath)

class ZoneId(tuple):
	"""
	# A `(name, rules)` pair; identified by the name.
	"""
	__slots__ = ()

	@property
	def name(self) -> str:
		return self[0]

	@property
	def rules(self) -> abstract.ZoneRules:
		return self[1]

	def __eq__(self, ob):
		return isinstance(ob, ZoneId) and ob[0] == self[0]

	def __ne__(self, ob):
		return not self.__eq__(ob)

	def __hash__(self):
		return hash(self[0])

	def __str__(self):
		return self[0]

	def __repr__(self):
		return "(ZoneId@'%s')" % (self[0],)

	@classmethod
	def fixed(Class, offset):
		"""
		# The zone that always uses &offset; named after the offset.
		"""
		offset = types.ZoneOffset(offset)
		return tuple.__new__(Class, (str(offset), FixedRules(offset)))

	@classmethod
	def of(Class, name):
		"""
		# Get the zone identified by &name.

		# `Z` and `UTC` identify &utc, names starting with a sign are fixed offsets,
		# and any other name is read from the TZif file relative to &tzif.tzdir.
		# Loaded zones are cached by name and directory.
		"""
		if name in ('Z', 'UTC'):
			return Class.utc
		if name[:1] in ('+', '-'):
			from . import format
			return Class.fixed(format.parse_offset(name))
		return _load(Class, tzif.tzdir, name)

	@classmethod
	def from_file(Class, name, filepath):
		return tuple.__new__(Class, (name, TransitionRules.from_file(filepath, name=name)))

	@classmethod
	def local(Class):
		"""
		# The zone identified by the `TZ` environment variable or the system's default zone.
		"""
		name = os.environ.get(tzif.tzenviron)
		if name:
			return Class.of(name.lstrip(':'))
		return Class.from_file('localtime', tzif.tzdefault)

@functools.lru_cache(maxsize=64)
def _load(Class, directory, name):
	return Class.from_file(name, tzif.system_timezone_file(name, directory))

ZoneId.utc = tuple.__new__(ZoneId, ('Z', FixedRules(types.ZoneOffset.utc)))
