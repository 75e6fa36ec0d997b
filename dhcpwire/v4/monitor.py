# SPDX-License-Identifier: MIT

import enum
import logging
import socket
import threading
from sys import stderr

from ..debug_helpers.wireshark import format_hexdump
from ..error import DecodeError, EncodeError
from .listener import (listen, DHCP_ADDRESS, DHCP_SERVER_PORT,
	DHCP_CLIENT_PORT)
from .message import decode, BOOTP_MINIMUM_SIZE

BROADCAST_ADDRESS = '255.255.255.255'
UNSPECIFIED_ADDRESS = '0.0.0.0'


def describe_type(message):
	message_type = message.message_type
	if message_type is None:
		# NOTE(tori): no message type option means plain BOOTP
		return 'BOOTP'
	if isinstance(message_type, enum.Enum):
		return message_type.name
	return 'TYPE_%d' % message_type


def get_reply_address(request):
	# NOTE(tori): rfc2131 section 4.1; relayed requests go back to the relay,
	# clients without an address only hear broadcasts
	if request.giaddr != UNSPECIFIED_ADDRESS:
		return request.giaddr, DHCP_SERVER_PORT
	if request.ciaddr != UNSPECIFIED_ADDRESS:
		return request.ciaddr, DHCP_CLIENT_PORT
	return BROADCAST_ADDRESS, DHCP_CLIENT_PORT


class Monitor:
	"""Receive loop around the codec.

	Every datagram is decoded and logged. If a `handler` is given it is
	called as `handler(message, address)` and may return a `Message`, which
	is encoded and sent back to the client.
	"""

	def __init__(self, logger, address=DHCP_ADDRESS, port=DHCP_SERVER_PORT,
		interface=None, handler=None, hexdump=False, sock=None, timeout=5):
		self.logger = logger
		self.handler = handler
		self.hexdump = hexdump
		if sock is None:
			sock = listen(address, port, interface)
			sock.settimeout(timeout)
		self.socket = sock

	def recv(self):
		return self.socket.recvfrom(65535)

	def send(self, message, address, pad_to=BOOTP_MINIMUM_SIZE):
		data = message.encode(pad_to=pad_to)
		self.socket.sendto(data, address)
		return data

	def handle_datagram(self, data, address):
		host, port = address[:2]
		if self.hexdump:
			self.logger.debug('%s:%d - %d bytes\n%s', host, port, len(data),
				format_hexdump(data))

		try:
			request = decode(data)
		except DecodeError as e:
			self.logger.warning('%s:%d - could not decode datagram (caused by'
				' %r)', host, port, e)
			return None

		self.logger.info('%s:%d - %s xid=%#010x chaddr=%s', host, port,
			describe_type(request), request.xid, request.chaddr)
		self.logger.debug('%r', request)

		if self.handler is None:
			return None

		try:
			response = self.handler(request, address)
		except Exception as e:
			self.logger.error('could not handle request (caused by %r)',
				type(e).__name__)
			if __debug__:
				raise e
			return None

		if response is None:
			return None

		reply_address = get_reply_address(request)
		try:
			self.send(response, reply_address)
		except (EncodeError, OSError) as e:
			self.logger.warning('%s:%d - could not send reply (caused by %r)',
				reply_address[0], reply_address[1], e)
			return None
		self.logger.info('%s:%d - replied %s xid=%#010x', reply_address[0],
			reply_address[1], describe_type(response), response.xid)
		return response

	def handle_client(self):
		try:
			data, address = self.recv()
		except socket.timeout:
			return None
		return self.handle_datagram(data, address)

	def close(self):
		self.socket.close()


class MonitorDaemon:
	def client_target(self):
		while self.running:
			self.monitor.handle_client()

	def __init__(self, *args, **kwargs):
		self.monitor = Monitor(*args, **kwargs)
		self.running = False
		self.client_thread = None

	def run(self):
		if self.running:
			return False
		self.running = True
		self.client_thread = threading.Thread(target=self.client_target,
			daemon=True)
		self.client_thread.start()
		return True

	def stop(self):
		if not self.running:
			return False
		self.running = False
		self.client_thread.join()
		self.monitor.close()
		return True


def configure_logging(output='-', level='INFO'):
	if isinstance(output, str):
		if output == '-':
			log_handler = logging.StreamHandler(stderr)
		else:
			log_handler = logging.FileHandler(output)
	else:
		log_handler = logging.StreamHandler(output)

	log_format = '{asctime}|{name}|{levelname}|{message}'
	log_formatter = logging.Formatter(log_format, style='{')
	log_handler.setFormatter(log_formatter)

	# NOTE(tori): configure the package logger so the codec modules' debug
	# output ends up in the same place
	logger = logging.getLogger('dhcpwire')
	for handler in list(logger.handlers):
		logger.removeHandler(handler)
	logger.addHandler(log_handler)

	logger.setLevel(level)

	return logger


def main(argv=None):
	import argparse

	from ..platform_specific import list_ifaces

	parser = argparse.ArgumentParser(
		description='log BOOTP/DHCPv4 datagrams as they arrive')
	parser.add_argument('-f', '--log-file', default='-',
		help='location to log messages, - for stderr')
	parser.add_argument('-l', '--log-level', default='INFO', choices=('ALL',
		'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'), type=str.upper,
		help='verbosity of log messages, in descending order')
	parser.add_argument('-a', '--address', default=DHCP_ADDRESS,
		help='address on which to bind (default: %(default)s)')
	parser.add_argument('-p', '--port', default=DHCP_SERVER_PORT, type=int,
		help='port on which to bind (default: %(default)s)')
	parser.add_argument('-i', '--interface', metavar='IF', default=None,
		choices=list_ifaces(),
		help='interface on which to bind: one of %(choices)s')
	parser.add_argument('--hexdump', action='store_true',
		help='also log a hex dump of every datagram at debug level')
	args = parser.parse_args(argv)

	level = 0 if args.log_level == 'ALL' else getattr(logging, args.log_level)
	logger = configure_logging(output=args.log_file, level=level)

	try:
		monitor = Monitor(logger, address=args.address, port=args.port,
			interface=args.interface, hexdump=args.hexdump)
	except OSError as e:
		logger.error('could not listen on %s:%d (caused by %r)', args.address,
			args.port, e)
		return 1

	logger.info('listening on %s:%d', args.address, args.port)
	try:
		while True:
			monitor.handle_client()
	except KeyboardInterrupt:
		pass
	except Exception as e:
		logger.error('unhandled monitor error (caused by %r)', e)
		if __debug__:
			raise e
		return 1
	finally:
		monitor.close()
	return 0


if __name__ == '__main__':
	raise SystemExit(main())

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
