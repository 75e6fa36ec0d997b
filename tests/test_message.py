# SPDX-License-Identifier: MIT

import pytest

from dhcpwire.error import (TruncatedHeader, InvalidMagicCookie,
	TruncatedOption, OptionTooLarge, InvalidField, DecodeError)
from dhcpwire.hardwaretype import HardwareType
from dhcpwire.option_codecs import OptionKind, OptionValue
from dhcpwire.v4 import (Message, Option, Operation, Flags, MessageType,
	RFC2132OptionType, make_option, decode, encode, DHCP_MAGIC_COOKIE,
	BOOTP_MINIMUM_SIZE)

from conftest import make_packet, HEADER


def make_message(**kwargs):
	fields = dict(
		op=Operation.REQUEST,
		xid=0xDEADBEEF,
		secs=7,
		flags=Flags.BROADCAST,
		ciaddr='192.168.1.50',
		chaddr='00:0c:29:00:5a:01',
		sname='boot.example',
		file='pxelinux.0',
		options=[
			(RFC2132OptionType.MESSAGE_TYPE, MessageType.DISCOVER),
			(RFC2132OptionType.PARAMETER_REQUEST_LIST, [1, 3, 6, 15]),
			(RFC2132OptionType.HOST_NAME, 'client'),
			(RFC2132OptionType.REQUESTED_IP_ADDRESS, '192.168.1.50'),
		],
	)
	fields.update(kwargs)
	return Message.new(**fields)


class TestDecodeHeader:

	def test_offsets(self):
		message = decode(make_packet())
		assert message.op == 1
		assert message.htype == 1
		assert message.hlen == 6
		assert message.hops == 0
		assert message.xid == 0x3903F326
		assert message.secs == 3
		assert message.flags == 0x8000
		assert message.ciaddr == '192.168.1.50'
		assert message.yiaddr == '0.0.0.0'
		assert message.siaddr == '192.168.1.1'
		assert message.giaddr == '10.0.0.1'
		assert message.chaddr == '00:0c:29:3e:5a:01'
		assert message.sname == 'boot.example'
		assert message.file == 'pxelinux.0'
		assert message.magic_cookie == DHCP_MAGIC_COOKIE
		assert message.options == ()

	def test_enums(self):
		message = decode(make_packet())
		assert message.op is Operation.REQUEST
		assert message.htype is HardwareType.ETHERNET
		assert message.flags & Flags.BROADCAST

	def test_unknown_header_values_stay_ints(self):
		header = bytes([0x07, 0xFE]) + HEADER[2:]
		message = decode(make_packet(header=header))
		assert message.op == 7
		assert message.htype == 254

	def test_chaddr_uses_hlen(self):
		header = HEADER[:2] + bytes([3]) + HEADER[3:]
		assert decode(make_packet(header=header)).chaddr == '00:0c:29'

	def test_chaddr_caps_at_sixteen_bytes(self):
		header = (HEADER[:2] + bytes([20]) + HEADER[3:28] + bytes(range(16))
			+ HEADER[44:])
		message = decode(make_packet(header=header))
		assert message.hlen == 20
		assert message.chaddr == ':'.join('%02x' % i for i in range(16))

	def test_text_fields_strip_every_nul(self):
		header = HEADER[:44] + (b'a\0b' + b'\0'*61) + HEADER[108:]
		assert decode(make_packet(header=header)).sname == 'ab'

	def test_text_fields_keep_undecodable_bytes(self):
		header = HEADER[:44] + b'\xe9'*40 + b'\0'*24 + HEADER[108:]
		packet = make_packet(header=header)
		message = decode(packet)
		assert message.sname == '\udce9' * 40
		assert encode(message) == packet

	def test_accepts_bytearray_and_memoryview(self):
		packet = make_packet()
		assert decode(bytearray(packet)) == decode(packet)
		assert decode(memoryview(packet)) == decode(packet)


class TestDecodeErrors:

	def test_truncated_header(self):
		with pytest.raises(TruncatedHeader, match='239 bytes'):
			decode(make_packet()[:239])
		with pytest.raises(TruncatedHeader):
			decode(b'')

	def test_exactly_header_and_cookie(self):
		message = decode(make_packet(options=b''))
		assert message.options == ()

	def test_invalid_magic_cookie(self):
		with pytest.raises(InvalidMagicCookie):
			decode(make_packet(cookie=b'\0\0\0\0'))

	def test_truncated_option(self):
		options = bytes([0x35, 0x01, 0x01, 0x32, 0x04, 0xAA, 0xBB])
		with pytest.raises(TruncatedOption):
			decode(make_packet(options=options))

	def test_errors_share_a_base(self):
		for packet in (b'\x01', make_packet(cookie=b'\x63\x82\x53\x64'),
			make_packet(options=b'\x01\x04\xff')):
			with pytest.raises(DecodeError):
				decode(packet)


class TestDecodeOptions:

	def test_options(self):
		options = bytes([
			0x00, 0x00,
			0x35, 0x01, 0x03,
			0x32, 0x04, 0xC0, 0xA8, 0x01, 0x32,
			0xC8, 0x02, 0x01, 0x02,
			0xFF,
			0x35, 0x01, 0x05,
		])
		message = decode(make_packet(options=options))
		assert message.options == (
			Option(RFC2132OptionType.MESSAGE_TYPE, b'\x03',
				OptionValue(OptionKind.UINT8, 3)),
			Option(RFC2132OptionType.REQUESTED_IP_ADDRESS, b'\xc0\xa8\x01\x32',
				OptionValue(OptionKind.ADDRESS, '192.168.1.50')),
			Option(200, b'\x01\x02',
				OptionValue(OptionKind.UNRECOGNIZED, b'\x01\x02')),
		)
		assert message.message_type is MessageType.REQUEST

	def test_end_of_buffer_without_end_tag(self):
		options = bytes([0x35, 0x01, 0x01, 0x0c, 0x06]) + b'client'
		message = decode(make_packet(options=options))
		assert [option.code for option in message.options] == [53, 12]
		assert message.get_option(12).value.value == 'client'

	def test_duplicates_are_preserved(self):
		options = bytes([0x0c, 0x01, 0x61, 0x0c, 0x01, 0x62, 0xff])
		message = decode(make_packet(options=options))
		assert [o.value.value for o in message.get_options(12)] == ['a', 'b']
		assert message.get_option(12).data == b'a'
		assert message.get_option(1) is None
		assert message.get_option(1, default=False) is False

	def test_message_type(self):
		assert decode(make_packet()).message_type is None
		message = decode(make_packet(options=b'\x35\x01\x63\xff'))
		assert message.message_type == 99
		message = decode(make_packet(options=b'\x35\x00\xff'))
		assert message.message_type is None


class TestEncode:

	def test_layout(self):
		packet = encode(make_message())
		assert packet[:4] == bytes([0x01, 0x01, 0x06, 0x00])
		assert packet[4:8] == b'\xde\xad\xbe\xef'
		assert packet[8:12] == b'\x00\x07\x80\x00'
		assert packet[12:16] == bytes([192, 168, 1, 50])
		assert packet[16:28] == b'\0' * 12
		assert packet[28:44] == bytes([0, 0x0c, 0x29, 0, 0x5a, 1]) + b'\0'*10
		assert packet[44:108] == b'boot.example' + b'\0'*52
		assert packet[108:236] == b'pxelinux.0' + b'\0'*118
		assert packet[236:240] == DHCP_MAGIC_COOKIE
		assert packet[240:] == bytes([
			0x35, 0x01, 0x01,
			0x37, 0x04, 0x01, 0x03, 0x06, 0x0f,
			0x0c, 0x06]) + b'client' + bytes([
			0x32, 0x04, 0xc0, 0xa8, 0x01, 0x32,
			0xff,
		])

	def test_decoded_packet_reencodes(self):
		options = bytes([0x35, 0x01, 0x01, 0xC8, 0x02, 0x01, 0x02, 0xff])
		packet = make_packet(options=options)
		assert encode(decode(packet)) == packet

	def test_chaddr_is_cut_to_hlen(self):
		message = make_message(hlen=3)
		assert message.chaddr == '00:0c:29'
		wide = message.replace(chaddr='00:0c:29:00:5a:01')
		assert encode(wide)[28:44] == bytes([0, 0x0c, 0x29]) + b'\0'*13

	def test_pad_to(self):
		message = make_message(options=[(53, 1)])
		packet = encode(message, pad_to=BOOTP_MINIMUM_SIZE)
		assert len(packet) == BOOTP_MINIMUM_SIZE
		assert packet[240:244] == b'\x35\x01\x01\xff'
		assert set(packet[244:]) == {0}
		assert decode(packet) == message
		# NOTE(tori): never truncates
		assert len(encode(make_message(), pad_to=10)) > 240

	def test_pad_and_end_options_are_not_written(self):
		message = make_message(options=[
			Option(0, b'', OptionValue(OptionKind.UNRECOGNIZED, b'')),
			make_option(53, 1),
		])
		assert encode(message)[240:] == b'\x35\x01\x01\xff'

	def test_option_too_large(self):
		large = Option(224, b'x' * 256,
			OptionValue(OptionKind.UNRECOGNIZED, b'x' * 256))
		with pytest.raises(OptionTooLarge, match='256 bytes'):
			encode(make_message(options=[large]))
		fits = large._replace(data=b'x' * 255)
		assert len(encode(make_message(options=[fits]))) == 240 + 2 + 255 + 1

	@pytest.mark.parametrize('fields, message', [
		(dict(xid=1 << 32), 'xid'),
		(dict(secs=-1), 'secs'),
		(dict(hops=256), 'hops'),
		(dict(op='request'), 'op'),
		(dict(ciaddr='192.168.1.256'), 'ciaddr'),
		(dict(chaddr='zz:zz'), 'chaddr'),
		(dict(chaddr=':'.join(['01'] * 17)), 'hardware address too long'),
		(dict(sname='x' * 65), 'server name too long'),
		(dict(file='x' * 129), 'boot file name too long'),
		(dict(sname=['boot']), 'server name: expected text'),
		(dict(file='\ud800'), 'boot file name'),
		(dict(hlen=300), 'hlen'),
	])
	def test_invalid_fields(self, fields, message):
		with pytest.raises(InvalidField, match=message):
			encode(make_message().replace(**fields))

	def test_message_methods(self):
		message = make_message()
		assert message.encode() == encode(message)
		assert Message.decode(message.encode()) == message


class TestRoundTrip:

	def test_discover(self):
		message = make_message()
		assert decode(encode(message)) == message

	def test_offer(self):
		message = Message.new(
			op=Operation.REPLY,
			xid=0x12345678,
			yiaddr='10.0.0.23',
			siaddr='10.0.0.1',
			chaddr=b'\x00\x0c\x29\x3e\x5a\x01',
			options={
				RFC2132OptionType.MESSAGE_TYPE: MessageType.OFFER,
				RFC2132OptionType.SERVER_IDENTIFIER: '10.0.0.1',
				RFC2132OptionType.SUBNET_MASK: '255.255.255.0',
				RFC2132OptionType.ROUTER: ['10.0.0.1'],
				RFC2132OptionType.DOMAIN_NAME_SERVER: ['8.8.8.8', '8.8.4.4'],
				RFC2132OptionType.IP_ADDRESS_LEASE_TIME: 3000,
				RFC2132OptionType.RENEWAL_TIME_VALUE: 1500,
				RFC2132OptionType.REBINDING_TIME_VALUE: 2000,
				RFC2132OptionType.TIME_OFFSET: -18000,
				RFC2132OptionType.IP_FORWARDING_ENABLE: False,
				RFC2132OptionType.DOMAIN_NAME: 'example.org',
				RFC2132OptionType.PATH_MTU_PLATEAU_TABLE: [576, 1500],
				224: b'\xca\xfe',
			},
		)
		decoded = decode(encode(message))
		assert decoded == message
		assert decoded.message_type is MessageType.OFFER
		assert decoded.get_option(224).kind is OptionKind.UNRECOGNIZED

	def test_defaults(self):
		message = Message.new(op=Operation.REQUEST)
		assert message.htype is HardwareType.ETHERNET
		assert message.hlen == 6
		assert message.chaddr == '00:00:00:00:00:00'
		assert message.ciaddr == '0.0.0.0'
		assert message.xid in range(1 << 32)
		assert message.magic_cookie == DHCP_MAGIC_COOKIE
		assert decode(encode(message)) == message

	def test_hardware_address_with_zero_bytes(self):
		message = make_message(chaddr=b'\x00\x00\x00\x00\x00\x01')
		assert message.hardware_address == b'\x00\x00\x00\x00\x00\x01'
		decoded = decode(encode(message))
		assert decoded.chaddr == '00:00:00:00:00:01'
		assert decoded == message

	def test_best_effort_options(self):
		message = make_message(options=[
			Option.decode(51, b'\x00\x01'),
			Option.decode(1, b''),
		])
		assert message.options[0].value == OptionValue(OptionKind.UINT32, 1)
		assert message.options[1].kind is OptionKind.OPAQUE
		assert decode(encode(message)) == message
