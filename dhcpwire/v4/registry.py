# SPDX-License-Identifier: MIT

"""Process-wide option registries for DHCPv4

`option_types` turns raw codes into named enum members and `option_codecs`
maps codes to field types. The rfc2132 modules register themselves on
import; applications may register their own vendor tables next to them.
"""

__all__ = ['option_types', 'option_codecs', 'register_type',
	'unregister_type', 'get_option', 'register_codec', 'unregister_codec',
	'get_codec', 'encode_option', 'decode_option']

from ..optiontypes import TypeRegistry
from ..option_codecs import CodecRegistry

option_types = TypeRegistry()
option_codecs = CodecRegistry()

register_type = option_types.register
unregister_type = option_types.unregister
get_option = option_types.get

register_codec = option_codecs.register
unregister_codec = option_codecs.unregister
get_codec = option_codecs.get
encode_option = option_codecs.encode
decode_option = option_codecs.decode

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
