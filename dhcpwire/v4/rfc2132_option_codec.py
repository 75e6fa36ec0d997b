# SPDX-License-Identifier: MIT

__all__ = ['rfc2132_option_codec']

from functools import wraps

from ..error import CodecError
from ..formatters import (format_address, parse_address, format_addresses,
	parse_addresses, format_text, parse_text, boolean, uint8, uint16, int32,
	uint32)
from ..option_codecs import (OptionKind, FieldType, Codec, Fixed, Multiple,
	Variable)
from .registry import register_codec
from .rfc2132 import RFC2132OptionType

# NOTE(tori): one field type per payload layout, and a table pointing every
# rfc2132 option at one of them; no per-option functions


def make_unpacker(struct):
	def unpacker(data):
		if len(data) == struct.size:
			result, = struct.unpack(data)
			return result
		if not data:
			raise ValueError('empty integer payload')
		# NOTE(tori): wrong-sized integers are read big-endian as they are
		signed = struct.format[-1].islower()
		return int.from_bytes(data, 'big', signed=signed)
	return unpacker


def make_guarded(fn, check=lambda _: True, exc=None):
	@wraps(fn)
	def wrapper(value):
		if not check(value):
			if exc is None:
				message = 'invalid value: %r' % (value,)
			else:
				message = '%s: %r' % (exc, value)
			raise CodecError(message)
		return fn(value)
	return wrapper


def decode_ip(encoded):
	if not encoded:
		raise ValueError('empty address payload')
	# NOTE(tori): short addresses are zero-filled, long ones cut at 4 bytes
	return format_address((encoded + b'\0'*4)[:4])


def decode_ips(encoded):
	if len(encoded) < 4:
		raise ValueError('invalid encoded IP list: %r' % encoded)
	return tuple(format_addresses(encoded))


def encode_uint8s(decoded):
	return bytes(int(value) for value in decoded)


def decode_uint8s(encoded):
	return tuple(encoded)


def encode_uint16s(decoded):
	return b''.join(uint16.pack(value) for value in decoded)


def decode_uint16s(encoded):
	if len(encoded) < 2:
		raise ValueError('invalid encoded uint16 list: %r' % encoded)
	return tuple(uint16.unpack_from(encoded, i)[0]
		for i in range(0, len(encoded) - 1, 2))


def decode_boolean(encoded):
	return bool(make_unpacker(uint8)(encoded))


def nonempty(value):
	return len(value) > 0


# NOTE(tori): guard only the encodes, per Postel's Law
address = FieldType(OptionKind.ADDRESS, parse_address, decode_ip, Fixed(4))
address_list = FieldType(OptionKind.ADDRESS_LIST,
	make_guarded(parse_addresses, nonempty, 'address list must not be empty'),
	decode_ips, Multiple(4))
address_pairs = FieldType(OptionKind.ADDRESS_LIST,
	make_guarded(parse_addresses, lambda lst: nonempty(lst) and
		len(lst)%2 == 0, 'address pair list must have an even length'),
	decode_ips, Multiple(8))
optional_address_list = FieldType(OptionKind.ADDRESS_LIST, parse_addresses,
	lambda encoded: tuple(format_addresses(encoded)), Multiple(4, 0))
flag = FieldType(OptionKind.BOOLEAN, boolean.pack, decode_boolean, Fixed(1))
short = FieldType(OptionKind.UINT16, uint16.pack, make_unpacker(uint16),
	Fixed(2))
seconds = FieldType(OptionKind.UINT32, uint32.pack, make_unpacker(uint32),
	Fixed(4))
offset = FieldType(OptionKind.INT32, int32.pack, make_unpacker(int32),
	Fixed(4))
text = FieldType(OptionKind.TEXT,
	make_guarded(parse_text, nonempty, 'text must not be empty'),
	format_text, Variable(1))
opaque = FieldType(OptionKind.OPAQUE, bytes, bytes, Variable(1))


def guarded_byte(check, exc):
	return FieldType(OptionKind.UINT8, make_guarded(uint8.pack, check, exc),
		make_unpacker(uint8), Fixed(1))


def guarded_short(check, exc):
	return FieldType(OptionKind.UINT16, make_guarded(uint16.pack, check, exc),
		make_unpacker(uint16), Fixed(2))


rfc2132_option_codec = Codec(
	name='rfc2132',
	codecs={
		# XXX(tori): is there a better way? this feels weird calling an IP a
		# mask
		RFC2132OptionType.SUBNET_MASK: address,
		RFC2132OptionType.TIME_OFFSET: offset,
		RFC2132OptionType.ROUTER: address_list,
		RFC2132OptionType.TIME_SERVER: address_list,
		RFC2132OptionType.NAME_SERVER: address_list,
		RFC2132OptionType.DOMAIN_NAME_SERVER: address_list,
		RFC2132OptionType.LOG_SERVER: address_list,
		RFC2132OptionType.COOKIE_SERVER: address_list,
		RFC2132OptionType.LPR_SERVER: address_list,
		RFC2132OptionType.IMPRESS_SERVER: address_list,
		RFC2132OptionType.RESOURCE_LOCATION_SERVER: address_list,
		RFC2132OptionType.HOST_NAME: text,
		RFC2132OptionType.BOOT_FILE_SIZE: short,
		RFC2132OptionType.MERIT_DUMP_FILE: text,
		RFC2132OptionType.DOMAIN_NAME: text,
		RFC2132OptionType.SWAP_SERVER: address,
		RFC2132OptionType.ROOT_PATH: text,
		RFC2132OptionType.EXTENSIONS_PATH: text,
		RFC2132OptionType.IP_FORWARDING_ENABLE: flag,
		RFC2132OptionType.NONLOCAL_SOURCE_ROUTING_ENABLE: flag,
		RFC2132OptionType.POLICY_FILTER: address_pairs,
		RFC2132OptionType.MAXIMUM_DATAGRAM_REASSEMBLY_SIZE: guarded_short(
			lambda n: n >= 576,
			'maximum datagram reassembly size must be at least 576'),
		RFC2132OptionType.DEFAULT_IP_TTL: guarded_byte(lambda n: n > 0,
			'value must be greater than 0'),
		RFC2132OptionType.PATH_MTU_AGING_TIMEOUT: seconds,
		RFC2132OptionType.PATH_MTU_PLATEAU_TABLE: FieldType(
			OptionKind.UINT16_LIST,
			make_guarded(encode_uint16s,
				lambda lst: nonempty(lst) and all(n >= 68 for n in lst),
				'MTU must be at least 68'),
			decode_uint16s, Multiple(2)),
		RFC2132OptionType.INTERFACE_MTU: guarded_short(lambda n: n >= 68,
			'MTU must be at least 68'),
		RFC2132OptionType.ALL_SUBNETS_ARE_LOCAL: flag,
		RFC2132OptionType.BROADCAST_ADDRESS: address,
		RFC2132OptionType.PERFORM_MASK_DISCOVERY: flag,
		RFC2132OptionType.MASK_SUPPLIER: flag,
		RFC2132OptionType.PERFORM_ROUTER_DISCOVERY: flag,
		RFC2132OptionType.ROUTER_SOLICITATION_ADDRESS: address,
		RFC2132OptionType.STATIC_ROUTE: address_pairs,
		RFC2132OptionType.TRAILER_ENCAPSULATION: flag,
		RFC2132OptionType.ARP_CACHE_TIMEOUT: seconds,
		RFC2132OptionType.ETHERNET_ENCAPSULATION: flag,
		RFC2132OptionType.TCP_DEFAULT_TTL: guarded_byte(lambda n: n > 0,
			'TCP default TTL must be at least 1'),
		RFC2132OptionType.TCP_KEEPALIVE_INTERVAL: seconds,
		RFC2132OptionType.TCP_KEEPALIVE_GARBAGE: flag,
		RFC2132OptionType.NETWORK_INFORMATION_SERVICE_DOMAIN: text,
		RFC2132OptionType.NETWORK_INFORMATION_SERVERS: address_list,
		RFC2132OptionType.NETWORK_TIME_PROTOCOL_SERVERS: address_list,
		RFC2132OptionType.VENDOR_SPECIFIC_INFORMATION: FieldType(
			OptionKind.OPAQUE,
			make_guarded(lambda v: bytes(v),
				lambda v: b'\x63\x82\x53\x63' not in bytes(v),
				'dhcp magic cookie must not exist in vendor specific data'),
			bytes, Variable(1)),
		RFC2132OptionType.NETBIOS_OVER_TCPIP_NAME_SERVER: address_list,
		RFC2132OptionType.NETBIOS_OVER_TCPIP_DATAGRAM_DISTRIBUTION_SERVER: (
			address_list
		),
		RFC2132OptionType.NETBIOS_OVER_TCPIP_NODE_TYPE: guarded_byte(
			lambda v: v in (0x1, 0x2, 0x4, 0x8),
			'invalid NetBIOS over TCP/IP Node Type'),
		RFC2132OptionType.NETBIOS_OVER_TCPIP_SCOPE: text,
		RFC2132OptionType.X_WINDOW_SYSTEM_FONT_SERVER: address_list,
		RFC2132OptionType.X_WINDOW_SYSTEM_DISPLAY_MANAGER: address_list,
		RFC2132OptionType.REQUESTED_IP_ADDRESS: address,
		RFC2132OptionType.IP_ADDRESS_LEASE_TIME: seconds,
		RFC2132OptionType.OPTION_OVERLOAD: guarded_byte(
			lambda v: v in (1, 2, 3), 'invalid option overload value'),
		# NOTE(tori): no upper bound, the lease query types go up to 18
		RFC2132OptionType.MESSAGE_TYPE: guarded_byte(lambda v: v > 0,
			'invalid message type value'),
		RFC2132OptionType.SERVER_IDENTIFIER: address,
		RFC2132OptionType.PARAMETER_REQUEST_LIST: FieldType(
			OptionKind.UINT8_LIST,
			make_guarded(encode_uint8s, nonempty,
				'parameter request list must not be empty'),
			decode_uint8s, Variable(1)),
		RFC2132OptionType.MESSAGE: text,
		RFC2132OptionType.MAXIMUM_DHCP_MESSAGE_SIZE: guarded_short(
			lambda n: n >= 576,
			'maximum DHCP reassembly size must be at least 576'),
		RFC2132OptionType.RENEWAL_TIME_VALUE: seconds,
		RFC2132OptionType.REBINDING_TIME_VALUE: seconds,
		RFC2132OptionType.VENDOR_CLASS_IDENTIFIER: opaque,
		RFC2132OptionType.CLIENT_IDENTIFIER: FieldType(OptionKind.OPAQUE,
			make_guarded(lambda v: bytes(v), lambda v: len(v) > 1,
				'client identifier must be at least 2 bytes'),
			bytes, Variable(2)),
		RFC2132OptionType.NETWORK_INFORMATION_SERVICE_PLUS_DOMAIN: text,
		RFC2132OptionType.NETWORK_INFORMATION_SERVICE_PLUS_SERVERS: (
			address_list
		),
		RFC2132OptionType.TFTP_SERVER_NAME: text,
		RFC2132OptionType.BOOTFILE_NAME: text,
		RFC2132OptionType.MOBILE_IP_HOME_AGENT: optional_address_list,
		RFC2132OptionType.SIMPLE_MAIL_TRANSPORT_PROTOCOL_SERVER: (
			address_list
		),
		RFC2132OptionType.POST_OFFICE_PROTOCOL_SERVER: address_list,
		RFC2132OptionType.NETWORK_NEWS_TRANSPORT_PROTOCOL: address_list,
		RFC2132OptionType.DEFAULT_WORLD_WIDE_WEB_SERVER: address_list,
		RFC2132OptionType.DEFAULT_FINGER_SERVER: address_list,
		RFC2132OptionType.DEFAULT_INTERNET_RELAY_CHAT_SERVER: address_list,
		RFC2132OptionType.STREETTALK_SERVER: address_list,
		RFC2132OptionType.STREETTALK_DIRECTORY_ASSISTANCE_SERVER: (
			address_list
		),
		# XXX(tori): rfc4702 gives this flags and two rcodes before the name;
		# kept as text so it reads like the host name option
		RFC2132OptionType.CLIENT_FQDN: text,
	}
)

register_codec(rfc2132_option_codec)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
