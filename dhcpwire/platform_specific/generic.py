# SPDX-License-Identifier: CC0-1.0

import socket

from . import linux


def list_ifaces():
	return sorted(name for index, name in socket.if_nameindex())


def broadcast_listen(target_address, target_port, target_type,
	target_family=None, interface=None):
	if interface is not None:
		raise OSError('binding to %r needs SO_BINDTODEVICE (linux only)'
			% interface)
	return linux.broadcast_listen(target_address, target_port, target_type,
		target_family=target_family)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
