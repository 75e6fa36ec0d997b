# SPDX-License-Identifier: MIT

__all__ = ['Error', 'DecodeError', 'TruncatedHeader', 'InvalidMagicCookie',
	'TruncatedOption', 'EncodeError', 'OptionTooLarge', 'InvalidField',
	'CodecError']


class Error(Exception):
	"""Base class for dhcpwire errors"""
	pass


class DecodeError(Error):
	"""Base class for errors raised while decoding a datagram

	A decode error is terminal for the datagram: no partial message is
	returned.
	"""
	pass


class TruncatedHeader(DecodeError):
	"""Datagram is shorter than the fixed header and magic cookie"""
	pass


class InvalidMagicCookie(DecodeError):
	"""The four bytes at offset 236 are not the DHCP magic cookie"""
	pass


class TruncatedOption(DecodeError):
	"""An option declares more payload than the datagram holds"""
	pass


class EncodeError(Error):
	"""Base class for errors raised while encoding a message"""
	pass


class OptionTooLarge(EncodeError):
	"""An option payload does not fit in a one byte length"""
	pass


class InvalidField(EncodeError):
	"""A header value does not fit in its fixed-width field"""
	pass


class CodecError(Error, ValueError):
	pass

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
