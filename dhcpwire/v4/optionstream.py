# SPDX-License-Identifier: MIT

__all__ = ['iter_options', 'PAD', 'END', 'OPTIONS_OFFSET']

import logging

from ..error import TruncatedOption

logger = logging.getLogger(__name__)

PAD = 0x00
END = 0xFF

# NOTE(tori): 236 bytes of BOOTP header, then the 4 byte magic cookie
OPTIONS_OFFSET = 240


def iter_options(raw_data, offset=OPTIONS_OFFSET):
	"""Walk the option area of a datagram, yielding (code, payload) pairs.

	Pads are skipped, an end tag stops the walk without looking at what
	follows it, and running out of bytes right after a complete option ends
	the walk as well. Payloads are copied out of `raw_data`.

	Raises `TruncatedOption` if an option claims more bytes than remain.
	"""
	raw_data = memoryview(raw_data)
	position = offset
	while position < len(raw_data):
		option_tag = raw_data[position]
		position += 1
		if option_tag == PAD:
			continue
		if option_tag == END:
			return

		if position >= len(raw_data):
			raise TruncatedOption('option %d at offset %d has no length'
				% (option_tag, position - 1))
		option_length = raw_data[position]
		position += 1

		if position + option_length > len(raw_data):
			raise TruncatedOption(
				'option %d at offset %d declares %d bytes, %d remain'
				% (option_tag, position - 2, option_length,
				len(raw_data) - position)
			)
		option_data = bytes(raw_data[position:position + option_length])
		position += option_length

		yield option_tag, option_data

	logger.debug('no end tag')

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
