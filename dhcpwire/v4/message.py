# SPDX-License-Identifier: MIT

__all__ = ['Operation', 'HardwareType', 'Flags', 'MessageType', 'Option',
	'Message', 'make_option', 'decode', 'encode', 'DHCP_MAGIC_COOKIE',
	'BOOTP_MINIMUM_SIZE']

import enum
import struct
from collections import namedtuple
from random import randrange

from ..error import (TruncatedHeader, InvalidMagicCookie, OptionTooLarge,
	InvalidField)
from ..formatters import (format_address, parse_address,
	format_hardware_address, parse_hardware_address, format_text, parse_text)
from ..hardwaretype import HardwareType, hardware_address_length
from ..optiontypes import coerce
from ..option_codecs import OptionKind
from .optionstream import iter_options, PAD, END

# NOTE(tori): the rfc2132 imports also register the option types and codecs,
# so don't remove them
from .rfc2132 import RFC2132OptionType
from .rfc2132_option_codec import rfc2132_option_codec
from .registry import get_option, encode_option, decode_option

DHCP_MAGIC_COOKIE = b'\x63\x82\x53\x63'

# NOTE(tori): rfc1542 relays drop anything shorter than a BOOTP message
BOOTP_MINIMUM_SIZE = 300


class Operation(enum.IntEnum):
	REQUEST = 1
	REPLY = 2
	BOOTREQUEST = 1
	BOOTREPLY = 2


class Flags(enum.IntFlag):
	BROADCAST = 1 << 15


@enum.unique
class MessageType(enum.IntEnum):
	DISCOVER = 1
	OFFER = 2
	REQUEST = 3
	DECLINE = 4
	ACK = 5
	NAK = 6
	RELEASE = 7
	INFORM = 8
	# NOTE(tori): rfc3203
	FORCERENEW = 9
	# NOTE(tori): rfc4388
	LEASEQUERY = 10
	LEASEUNASSIGNED = 11
	LEASEUNKNOWN = 12
	LEASEACTIVE = 13
	# NOTE(tori): rfc6926
	BULKLEASEQUERY = 14
	LEASEQUERYDONE = 15
	# NOTE(tori): rfc7724
	ACTIVELEASEQUERY = 16
	LEASEQUERYSTATUS = 17
	TLS = 18


HEADER = struct.Struct(
	'!'			# network byte order (big)
	'BBBB'		# op, htype, hlen, hops
	'I'			# xid
	'HH'		# secs, flags
	'4s'		# ciaddr (client ip)
	'4s'		# yiaddr (given ip by server)
	'4s'		# siaddr (server ip address)
	'4s'		# giaddr (gateway ip address)
	'16s'		# chaddr (client hardware address)
	'64s'		# server host name (null-terminated)
	'128s'		# boot file name (null-terminated)
	'4s'		# magic cookie, options follow
)


class Option(namedtuple('Option', 'code data value')):
	"""One option as found in the option area.

	`data` is the payload exactly as it was on the wire and is what gets
	encoded; `value` is the `OptionValue` decoded from it.
	"""

	__slots__ = ()

	@classmethod
	def decode(cls, code, data):
		code = get_option(code, ignore_unknown=True)
		data = bytes(data)
		return cls(code, data, decode_option(code, data))

	@property
	def kind(self):
		return self.value.kind

	@property
	def name(self):
		if isinstance(self.code, enum.Enum):
			return self.code.name
		return 'OPTION_%d' % self.code


def make_option(code, value):
	"""Build an option from its decoded value, e.g. an address string."""
	code = get_option(code, ignore_unknown=True)
	return Option.decode(code, encode_option(code, value))


class Message(namedtuple('Message', 'op htype hlen hops xid secs flags'
	' ciaddr yiaddr siaddr giaddr chaddr sname file magic_cookie options')):
	__slots__ = ()

	@classmethod
	def new(cls, *, op, htype=HardwareType.ETHERNET, hlen=None, hops=0,
		xid=None, secs=0, flags=0, ciaddr=0, yiaddr=0, siaddr=0, giaddr=0,
		chaddr=b'', sname='', file='', options=()):
		if xid is None:
			xid = randrange(0x100000000)
		hwaddr = parse_hardware_address(chaddr)
		if hlen is None:
			hlen = len(hwaddr) or hardware_address_length(htype, 0)
		hwaddr = (hwaddr + b'\0'*16)[:min(hlen, 16)]
		if isinstance(options, dict):
			options = options.items()
		options = tuple(
			option if isinstance(option, Option) else make_option(*option)
			for option in options
		)
		return cls(
			op=coerce(Operation, op),
			htype=coerce(HardwareType, htype),
			hlen=hlen,
			hops=hops,
			xid=xid,
			secs=secs,
			flags=Flags(flags),
			ciaddr=format_address(parse_address(ciaddr)),
			yiaddr=format_address(parse_address(yiaddr)),
			siaddr=format_address(parse_address(siaddr)),
			giaddr=format_address(parse_address(giaddr)),
			chaddr=format_hardware_address(hwaddr),
			sname=sname,
			file=file,
			magic_cookie=DHCP_MAGIC_COOKIE,
			options=options
		)

	@property
	def hardware_address(self):
		return parse_hardware_address(self.chaddr)

	@property
	def message_type(self):
		option = self.get_option(RFC2132OptionType.MESSAGE_TYPE)
		if option is None or option.kind != OptionKind.UINT8:
			return None
		return coerce(MessageType, option.value.value)

	def get_option(self, code, default=None):
		for option in self.options:
			if option.code == code:
				return option
		return default

	def get_options(self, code):
		return [option for option in self.options if option.code == code]

	def replace(self, **fields):
		return self._replace(**fields)

	def encode(self, pad_to=None):
		return encode(self, pad_to=pad_to)

	@classmethod
	def decode(cls, packet):
		return decode(packet)


def decode(packet):
	"""Decode one datagram into a `Message`.

	Raises `TruncatedHeader` for datagrams shorter than 240 bytes,
	`InvalidMagicCookie` when the cookie does not match and `TruncatedOption`
	when an option runs past the end of the datagram. Unknown option codes
	are kept as unrecognized options.
	"""
	packet = bytes(packet)
	if len(packet) < HEADER.size:
		raise TruncatedHeader('datagram is %d bytes, at least %d needed'
			% (len(packet), HEADER.size))

	(op, htype, hlen, hops, xid, secs, flags, ciaddr, yiaddr, siaddr, giaddr,
		chaddr, sname, file, magic_cookie) = HEADER.unpack_from(packet)

	if magic_cookie != DHCP_MAGIC_COOKIE:
		raise InvalidMagicCookie('bad magic cookie: %r' % magic_cookie)

	options = tuple(
		Option.decode(option_tag, option_data)
		for option_tag, option_data in iter_options(packet, HEADER.size)
	)

	return Message(
		op=coerce(Operation, op),
		htype=coerce(HardwareType, htype),
		hlen=hlen,
		hops=hops,
		xid=xid,
		secs=secs,
		flags=Flags(flags),
		ciaddr=format_address(ciaddr),
		yiaddr=format_address(yiaddr),
		siaddr=format_address(siaddr),
		giaddr=format_address(giaddr),
		chaddr=format_hardware_address(chaddr[:hlen]),
		sname=format_text(sname),
		file=format_text(file),
		magic_cookie=magic_cookie,
		options=options
	)


def check_range(name, value, size):
	if value not in range(1 << 8*size):
		raise InvalidField('%s: `%r` not in range(%#x)'
			% (name, value, 1 << 8*size))
	return value


def check_address(name, value):
	try:
		return parse_address(value)
	except ValueError:
		raise InvalidField('%s: `%r` is not an IPv4 address'
			% (name, value)) from None


def check_text(name, value, size):
	try:
		data = parse_text(value)
	except (TypeError, ValueError) as e:
		raise InvalidField('%s: %s' % (name, e)) from None
	if len(data) > size:
		raise InvalidField('encoded %s too long: `%r`' % (name, value))
	return data


def encode(message, pad_to=None):
	"""Encode a `Message` into a datagram.

	Options are written in order from their raw `data`, followed by a single
	end tag. With `pad_to`, pad bytes are appended after the end tag until
	the datagram is at least that long.
	"""
	hlen = check_range('hlen', message.hlen, 1)
	try:
		hwaddr = parse_hardware_address(message.chaddr)
	except ValueError as e:
		raise InvalidField('chaddr: %s' % e) from None
	if len(hwaddr) > 16:
		raise InvalidField('hardware address too long: `%r`'
			% message.chaddr)

	header = HEADER.pack(
		check_range('op', message.op, 1),
		check_range('htype', message.htype, 1),
		hlen,
		check_range('hops', message.hops, 1),
		check_range('xid', message.xid, 4),
		check_range('secs', message.secs, 2),
		check_range('flags', message.flags, 2),
		check_address('ciaddr', message.ciaddr),
		check_address('yiaddr', message.yiaddr),
		check_address('siaddr', message.siaddr),
		check_address('giaddr', message.giaddr),
		# NOTE(tori): struct zero-fills short byte strings
		hwaddr[:hlen],
		check_text('server name', message.sname, 64),
		check_text('boot file name', message.file, 128),
		DHCP_MAGIC_COOKIE
	)

	opts = bytearray()
	for option in message.options:
		if check_range('option code', option.code, 1) in (PAD, END):
			continue
		value = bytes(option.data)
		if len(value) > 255:
			raise OptionTooLarge('option %r payload is %d bytes, at most 255'
				' fit' % (option.code, len(value)))
		opts += bytes([option.code, len(value)]) + value
	opts.append(END)

	packet = header + bytes(opts)
	if pad_to is not None:
		packet += b'\0'*max(0, pad_to - len(packet))
	return packet

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
