# SPDX-License-Identifier: MIT

__all__ = ['HardwareType', 'hardware_address_length']

import enum

# NOTE(tori): hardware types come from the following:
# https://www.iana.org/assignments/arp-parameters/arp-parameters.xhtml


class HardwareType(enum.IntEnum):
	RESERVED = 0
	ETHERNET = 1
	ETH10MB = 1
	EXPERIMENTAL_ETHERNET = 2
	AX25 = 3
	PRONET_TOKEN_RING = 4
	CHAOS = 5
	IEEE_802 = 6
	ARCNET = 7
	LOCALTALK = 11
	FRAME_RELAY = 15
	ATM = 16
	HDLC = 17
	FIBRE_CHANNEL = 18
	SERIAL_LINE = 20
	IEEE_1394 = 24
	IPSEC_TUNNEL = 31
	INFINIBAND = 32


# NOTE(tori): only the types a DHCP client realistically shows up with
_ADDRESS_LENGTHS = {
	HardwareType.ETHERNET: 6,
	HardwareType.EXPERIMENTAL_ETHERNET: 1,
	HardwareType.IEEE_802: 6,
	HardwareType.ARCNET: 1,
	HardwareType.FIBRE_CHANNEL: 3,
	HardwareType.IEEE_1394: 8,
	# NOTE(tori): infiniband addresses are 20 bytes, which does not fit in
	# chaddr; rfc4390 says to send hlen 0 and use the client identifier
	HardwareType.INFINIBAND: 0,
}


def hardware_address_length(htype, default=None):
	"""Usual `hlen` for a hardware type, or `default` if there is none"""
	return _ADDRESS_LENGTHS.get(htype, default)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
