# SPDX-License-Identifier: MIT

import struct

import pytest

MAGIC_COOKIE = bytes([99, 130, 83, 99])

# NOTE(tori): a DISCOVER as sent by a typical linux client, without options
HEADER = (
	bytes([0x01, 0x01, 0x06, 0x00])
	+ struct.pack('!IHH', 0x3903F326, 3, 0x8000)
	+ bytes([192, 168, 1, 50])
	+ bytes([0, 0, 0, 0])
	+ bytes([192, 168, 1, 1])
	+ bytes([10, 0, 0, 1])
	+ (bytes([0x00, 0x0c, 0x29, 0x3e, 0x5a, 0x01]) + b'\0'*10)
	+ (b'boot.example' + b'\0'*52)
	+ (b'pxelinux.0' + b'\0'*118)
)


def make_packet(options=b'\xff', cookie=MAGIC_COOKIE, header=HEADER):
	return header + cookie + options


@pytest.fixture
def packet_factory():
	return make_packet
