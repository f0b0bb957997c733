"""
# Protocols of the collaborators consulted by the merge engine.

# Primarily, this module exists to document the interfaces; the redundant method
# declarations are intentional.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Calendrical(typing.Protocol):
	"""
	# An object that can provide the values of field rules.

	# Canonical temporal types and &.fields.Fields implement this.
	"""

	@abstractmethod
	def derive(self, rule):
		"""
		# The value of the &rule or &None when the object cannot provide it.
		"""

	@abstractmethod
	def get(self, rule):
		"""
		# The value of the &rule.

		# [ Exceptions ]
		# /&.core.UnsupportedField/
			# When the object cannot provide the value.
		"""

@typing.runtime_checkable
class DateResolver(typing.Protocol):
	"""
	# A policy constructing a date from a year, month, and a day-of-month that may
	# not exist in the month.
	"""

	@abstractmethod
	def __call__(self, year:int, month:int, day:int):
		"""
		# Construct the date identified by the parameters, adjusting or rejecting
		# a day-of-month that exceeds the length of the month.

		# [ Returns ]
		# A `(year, month, day)` tuple that identifies a real calendar day.

		# [ Exceptions ]
		# /&.core.InvalidCalendarDate/
			# When the policy does not adjust invalid days.
		"""

@typing.runtime_checkable
class ZoneRules(typing.Protocol):
	"""
	# The offset rules of a time zone.
	"""

	@abstractmethod
	def offset_at(self, epoch_second:int):
		"""
		# The &.types.ZoneOffset in effect at the instant identified by &epoch_second.
		"""

	@abstractmethod
	def valid_offsets(self, local_epoch_second:int):
		"""
		# The offsets that make the wall clock time, given as seconds since the epoch
		# without an offset applied, a real instant in the zone.

		# [ Returns ]
		# A sequence of zero (gap), one (normal), or two (overlap) &.types.ZoneOffset
		# instances; when two, the earlier instant's offset is first.
		"""

	@abstractmethod
	def transition_after(self, local_epoch_second:int):
		"""
		# The `(epoch_second, offset)` of the first transition at or after the local time,
		# or &None. Used to shift local times out of gaps.
		"""
