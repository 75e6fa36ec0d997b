# SPDX-License-Identifier: MIT

__all__ = ['CodecError', 'OptionKind', 'OptionValue', 'Fixed', 'Multiple',
	'Variable', 'FieldType', 'Codec', 'CodecRegistry', 'UNRECOGNIZED']

import enum
import logging
from collections import namedtuple
from struct import error as StructError

from .error import CodecError

logger = logging.getLogger(__name__)


@enum.unique
class OptionKind(enum.Enum):
	ADDRESS = 'address'
	ADDRESS_LIST = 'address_list'
	BOOLEAN = 'boolean'
	UINT8 = 'uint8'
	UINT16 = 'uint16'
	UINT32 = 'uint32'
	INT32 = 'int32'
	UINT8_LIST = 'uint8_list'
	UINT16_LIST = 'uint16_list'
	TEXT = 'text'
	OPAQUE = 'opaque'
	UNRECOGNIZED = 'unrecognized'


# NOTE(tori): the decoded side of an option, tagged with the kind of value it
# holds so callers can switch on `kind` without looking up the option code
OptionValue = namedtuple('OptionValue', 'kind value')


class Fixed(namedtuple('Fixed', 'size')):
	def accepts(self, length):
		return length == self.size


class Multiple(namedtuple('Multiple', 'size minimum', defaults=(1,))):
	def accepts(self, length):
		return length%self.size == 0 and length >= self.size*self.minimum


class Variable(namedtuple('Variable', 'minimum', defaults=(0,))):
	def accepts(self, length):
		return length >= self.minimum


class FieldType:
	"""How one option payload maps to a value and back.

	`length` is only a hint: payloads it does not accept are still handed to
	the decoder, and a decoder that gives up produces an opaque value instead
	of an error.
	"""

	def __init__(self, kind, encoder, decoder, length=Variable()):
		self.kind = kind
		self.encoder = encoder
		self.decoder = decoder
		self.length = length

	def decode(self, data):
		data = bytes(data)
		if not self.length.accepts(len(data)):
			logger.debug('unexpected %s payload length %d (expected %r)',
				self.kind.value, len(data), self.length)
		try:
			value = self.decoder(data)
		except (ValueError, StructError) as e:
			logger.debug('could not decode %s payload %r (caused by %r)',
				self.kind.value, data, e)
			return OptionValue(OptionKind.OPAQUE, data)
		return OptionValue(self.kind, value)

	def encode(self, value):
		if isinstance(value, OptionValue):
			value = value.value
		try:
			return bytes(self.encoder(value))
		except CodecError:
			raise
		except (ValueError, TypeError, StructError) as e:
			raise CodecError('cannot encode %r as %s: %s'
				% (value, self.kind.value, e)) from None

	def __repr__(self):
		return '%s(%s, %r)' % (type(self).__name__, self.kind.name,
			self.length)


UNRECOGNIZED = FieldType(OptionKind.UNRECOGNIZED, bytes, bytes)


class Codec:
	def __init__(self, *, name=None, codecs=None):
		if name is None:
			name = 'codec_%s' % id(self)
		self.name = name
		if codecs is None:
			codecs = {}
		self.codecs = codecs

	def get_codec(self, option):
		try:
			return self.codecs[option]
		except KeyError:
			raise CodecError('option %r cannot be encoded by this codec (%s)'
				% (option, self.name)
			) from None

	def __repr__(self):
		return '%s(name=%r)' % (type(self).__name__, self.name)


class CodecRegistry:
	def __init__(self):
		self.option_codecs = []

	def register(self, option_codec, priority=None):
		if not isinstance(option_codec, Codec):
			raise CodecError('%r is not an instance of Codec' % option_codec)
		if priority is None:
			priority = len(self.option_codecs)
		self.option_codecs.insert(priority, option_codec)

	def unregister(self, option_codec):
		try:
			self.option_codecs.remove(option_codec)
		except ValueError:
			pass

	def get(self, option, ignore_unknown=True):
		for option_codec in self.option_codecs:
			try:
				return option_codec.get_codec(option)
			except CodecError:
				continue
		else:
			if ignore_unknown:
				return UNRECOGNIZED
			else:
				raise CodecError(
					'%r is not a valid option for all registered option codecs'
					% option
				)

	def encode(self, option, value, ignore_unknown=True):
		return self.get(option, ignore_unknown).encode(value)

	def decode(self, option, data, ignore_unknown=True):
		return self.get(option, ignore_unknown).decode(data)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
