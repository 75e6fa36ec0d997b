# SPDX-License-Identifier: CC0-1.0

import os
import socket


def list_ifaces():
	return sorted(os.listdir('/sys/class/net'))


def broadcast_listen(target_address, target_port, target_type,
	target_family=None, interface=None):
	"""Bind a socket that also receives broadcast datagrams.

	With `interface`, the socket only sees traffic arriving on that device
	(`SO_BINDTODEVICE`, needs CAP_NET_RAW).
	"""
	addrinfos = socket.getaddrinfo(target_address, target_port)
	for addrinfo in addrinfos:
		family, type_, proto, canonname, sockaddr = addrinfo
		if ((family == target_family or target_family is None)
			and (type_ == target_type)):
			sock = socket.socket(family, type_, proto)
			try:
				sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
				sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
				if interface is not None:
					if isinstance(interface, str):
						interface = interface.encode('utf-8')
					sock.setsockopt(socket.SOL_SOCKET, socket.SO_BINDTODEVICE,
						interface + b'\0')
				sock.bind(sockaddr)
			except OSError:
				sock.close()
				raise
			return sock
	else:
		raise OSError('could not listen on %s:%s' % (target_address,
			target_port))

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
