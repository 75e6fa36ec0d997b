# SPDX-License-Identifier: MIT

# NOTE(tori): same row layout as the hexdumps handed to wireshark


def format_hexdump(data):
	data = bytes(data)
	rows = []
	for i in range(0, len(data), 0x10):
		offset = '%08X' % i
		row = ' '.join('%02X' % byte for byte in data[i:i + 0x10])
		rows.append('%s:\t%s' % (offset, row))
	return '\n'.join(rows)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
