# SPDX-License-Identifier: MIT

__all__ = ['TypeRegistry', 'coerce']


def coerce(enum_type, value):
	"""Return the `enum_type` member for value, or value itself if unknown."""
	try:
		return enum_type(value)
	except ValueError:
		return value


class TypeRegistry:
	"""Ordered set of option code enumerations.

	Looking up a code returns the member of the first enumeration defining
	it, so that decoded options read as `SUBNET_MASK` rather than `1`;
	members are `IntEnum`s and still compare equal to the raw code.
	"""

	def __init__(self):
		self.OptionTypes = []

	def register(self, OptionType, priority=None):
		if priority is None:
			priority = len(self.OptionTypes)
		self.OptionTypes.insert(priority, OptionType)

	def unregister(self, OptionType):
		try:
			self.OptionTypes.remove(OptionType)
		except ValueError:
			pass

	def get(self, value, ignore_unknown=False):
		if value not in range(0x100):
			raise ValueError('%r is not an option code' % value)
		for OptionType in self.OptionTypes:
			try:
				return OptionType(value)
			except ValueError:
				continue
		if ignore_unknown:
			return int(value)
		raise ValueError(
			'%r is not a valid option for all registered option types'
			% value
		)

# NOTE(tori): option type enumerations SHOULD be of the format
# <name>OptionType and be a subclass of enum.IntEnum

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
