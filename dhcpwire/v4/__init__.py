"""dhcpwire.v4

BOOTP/DHCPv4 message codec

"""

__author__ = 'Tori Wolf <wiredwolf@wiredwolf.gg>'
__date__ = '2022-06-27'
# SPDX-License-Identifier: MIT
__license__ = 'MIT'
__copyright__ = '2022 Tori Wolf'

from .message import *
from .message import __all__ as message_all
from .rfc2132 import *
from .rfc2132 import __all__ as rfc2132_all
from .optionstream import iter_options
from .registry import (register_type, unregister_type, get_option,
	register_codec, unregister_codec, get_codec, encode_option, decode_option)
from ..option_codecs import OptionKind, OptionValue

registry_all = ['register_type', 'unregister_type', 'get_option',
	'register_codec', 'unregister_codec', 'get_codec', 'encode_option',
	'decode_option']

__all__ = [
	*message_all,
	*rfc2132_all,
	*registry_all,
	'iter_options',
	'OptionKind',
	'OptionValue'
]

# NOTE(tori): rfc2131 - header, decode and encode
# NOTE(tori): rfc2132 - option table, 1-61 and 64-76
# NOTE(tori): rfc4702 - client FQDN only as text
# XXX(tori): rfc3396 - long options are rejected rather than split
# XXX(tori): rfc2131 option overload is not followed into sname/file

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
