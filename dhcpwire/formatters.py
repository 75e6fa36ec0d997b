# SPDX-License-Identifier: MIT

"""Conversions between raw byte slices and their readable forms"""

__all__ = ['format_address', 'parse_address', 'format_addresses',
	'parse_addresses', 'format_hardware_address', 'parse_hardware_address',
	'format_text', 'parse_text', 'boolean', 'int8', 'uint8', 'int16',
	'uint16', 'int32', 'uint32']

from ipaddress import IPv4Address
from struct import Struct

boolean = Struct('!?')
int8 = Struct('!b')
uint8 = Struct('!B')
int16 = Struct('!h')
uint16 = Struct('!H')
int32 = Struct('!i')
uint32 = Struct('!I')


def format_address(data):
	data = bytes(data)
	if len(data) != 4:
		raise ValueError('invalid encoded IP: %r' % data)
	return str(IPv4Address(data))


def parse_address(value):
	if isinstance(value, bytearray):
		value = bytes(value)
	try:
		return IPv4Address(value).packed
	except Exception:
		raise ValueError('invalid decoded IP: %r' % value) from None


def format_addresses(data):
	# NOTE(tori): a trailing partial address is ignored, callers keep the raw
	# bytes around anyway
	data = bytes(data)
	return [format_address(data[i:i + 4])
		for i in range(0, len(data) - len(data)%4, 4)]


def parse_addresses(values):
	if isinstance(values, (str, IPv4Address)):
		values = (values,)
	return b''.join(parse_address(value) for value in values)


def format_hardware_address(data):
	"""Format a hardware address as lowercase hex octets joined by colons.

	Every byte is kept, zero bytes included; ``b'\\x00\\x1a'`` formats as
	``'00:1a'``.
	"""
	return ':'.join('%02x' % byte for byte in bytes(data))


def parse_hardware_address(value):
	if isinstance(value, (bytes, bytearray)):
		return bytes(value)
	if not value:
		return b''
	octets = value.replace('-', ':').split(':')
	try:
		if any(len(octet) not in (1, 2) for octet in octets):
			raise ValueError
		return bytes(int(octet, 16) for octet in octets)
	except ValueError:
		raise ValueError('invalid hardware address: %r' % value) from None


def format_text(data):
	# NOTE(tori): NULs are stripped everywhere, not just at the end; some
	# clients NUL-terminate host names inside the option payload. bytes that
	# are not utf-8 (latin-1 server names, overloaded sname/file) survive as
	# surrogates so parse_text gives them back unchanged
	text = bytes(data).decode('utf-8', errors='surrogateescape')
	return text.replace('\0', '')


def parse_text(value):
	if isinstance(value, (bytes, bytearray)):
		return bytes(value)
	if not isinstance(value, str):
		raise TypeError('expected text, got %s' % type(value).__name__)
	return value.encode('utf-8', errors='surrogateescape')

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
