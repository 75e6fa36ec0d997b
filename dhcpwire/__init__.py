"""dhcpwire

BOOTP/DHCPv4 wire codec

"""

__author__ = 'Tori Wolf <wiredwolf@wiredwolf.gg>'
__version__ = '0.1.0'
__date__ = '2026-10-18'
# SPDX-License-Identifier: MIT
__license__ = 'MIT'
__copyright__ = '2023 Tori Wolf'

from . import v4 as ipv4
from .error import (Error, DecodeError, TruncatedHeader, InvalidMagicCookie,
	TruncatedOption, EncodeError, OptionTooLarge, InvalidField, CodecError)

__all__ = ['ipv4', 'Error', 'DecodeError', 'TruncatedHeader',
	'InvalidMagicCookie', 'TruncatedOption', 'EncodeError', 'OptionTooLarge',
	'InvalidField', 'CodecError']

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
