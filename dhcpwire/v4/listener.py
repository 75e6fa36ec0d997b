# SPDX-License-Identifier: MIT

import socket

from ..platform_specific import broadcast_listen

DHCP_ADDRESS = '0.0.0.0'
DHCP_TYPE = socket.SOCK_DGRAM

DHCP_SERVER_PORT = 67
DHCP_CLIENT_PORT = 68


def listen(address=DHCP_ADDRESS, port=DHCP_SERVER_PORT, iface=None):
	return broadcast_listen(address, port, DHCP_TYPE,
		target_family=socket.AF_INET, interface=iface)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
