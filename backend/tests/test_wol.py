"""Tests for magic packet encoding and UDP transmission."""

import socket
from unittest.mock import patch

import pytest

from wakeup.errors import ErrorKind, WakeError
from wakeup.utils.wol import PACKET_LENGTH, encode_magic_packet, send_packets

MAC = bytes([0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF])


class TestEncode:
    def test_scenario_packet(self):
        packet = encode_magic_packet(MAC)
        assert packet == bytes([0xFF] * 6 + [0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF] * 16)
        assert len(packet) == 102 == PACKET_LENGTH

    @pytest.mark.parametrize("mac", [bytes(6), b"\xff" * 6, bytes(range(6)), bytes.fromhex("001122334455")])
    def test_layout(self, mac):
        packet = encode_magic_packet(mac)
        assert len(packet) == 102
        assert packet[:6] == b"\xff" * 6
        for i in range(16):
            assert packet[6 + 6 * i:12 + 6 * i] == mac

    def test_idempotent(self):
        assert encode_magic_packet(MAC) == encode_magic_packet(MAC)

    def test_accepts_bytearray(self):
        assert encode_magic_packet(bytearray(MAC)) == encode_magic_packet(MAC)

    @pytest.mark.parametrize("mac", [b"", MAC[:5], MAC + b"\x00"])
    def test_wrong_length_is_construction_error(self, mac):
        with pytest.raises(WakeError) as exc_info:
            encode_magic_packet(mac)
        assert exc_info.value.kind == ErrorKind.PACKET_CONSTRUCTION


class TestSendPackets:
    @patch("wakeup.utils.wol.socket")
    def test_broadcast_sends_in_order(self, mock_socket):
        sock = mock_socket.socket.return_value.__enter__.return_value
        packets = [encode_magic_packet(bytes([i]) * 6) for i in range(3)]

        sent = send_packets(packets, "255.255.255.255", 9)

        assert sent == 3
        mock_socket.socket.assert_called_once_with(mock_socket.AF_INET, mock_socket.SOCK_DGRAM)
        sock.setsockopt.assert_called_once_with(mock_socket.SOL_SOCKET, mock_socket.SO_BROADCAST, 1)
        assert [c.args for c in sock.sendto.call_args_list] == [
            (p, ("255.255.255.255", 9)) for p in packets
        ]

    @patch("wakeup.utils.wol.socket")
    def test_unicast_skips_broadcast_option(self, mock_socket):
        sock = mock_socket.socket.return_value.__enter__.return_value

        send_packets([encode_magic_packet(MAC)], "192.168.1.20", 7)

        sock.setsockopt.assert_not_called()
        sock.sendto.assert_called_once()

    @patch("wakeup.utils.wol.socket")
    def test_send_failure_aborts_and_closes(self, mock_socket):
        ctx = mock_socket.socket.return_value
        sock = ctx.__enter__.return_value
        sock.sendto.side_effect = [102, OSError("Network is unreachable"), 102]
        packets = [encode_magic_packet(MAC)] * 3

        with pytest.raises(WakeError) as exc_info:
            send_packets(packets, "255.255.255.255", 9)

        assert exc_info.value.kind == ErrorKind.TRANSMISSION_ERROR
        assert "after 1 packet" in exc_info.value.message
        assert sock.sendto.call_count == 2
        ctx.__exit__.assert_called_once()

    @patch("wakeup.utils.wol.socket")
    def test_socket_creation_failure(self, mock_socket):
        mock_socket.socket.side_effect = PermissionError("denied")

        with pytest.raises(WakeError) as exc_info:
            send_packets([encode_magic_packet(MAC)])
        assert exc_info.value.kind == ErrorKind.TRANSMISSION_ERROR

    @patch("wakeup.utils.wol.socket")
    def test_invalid_ip_rejected_before_socket(self, mock_socket):
        with pytest.raises(WakeError) as exc_info:
            send_packets([encode_magic_packet(MAC)], "127.0.0.a", 9)
        assert exc_info.value.kind == ErrorKind.INVALID_IP_FORMAT
        mock_socket.socket.assert_not_called()

    @patch("wakeup.utils.wol.socket")
    def test_unresolvable_address_is_transmission_error(self, mock_socket):
        sock = mock_socket.socket.return_value.__enter__.return_value
        sock.sendto.side_effect = socket.gaierror("Name or service not known")

        with pytest.raises(WakeError) as exc_info:
            send_packets([encode_magic_packet(MAC)], "999.1.1.1", 9)
        assert exc_info.value.kind == ErrorKind.TRANSMISSION_ERROR

    def test_loopback_delivery(self):
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as receiver:
            receiver.bind(("127.0.0.1", 0))
            receiver.settimeout(2.0)
            port = receiver.getsockname()[1]

            packet = encode_magic_packet(MAC)
            assert send_packets([packet], "127.0.0.1", port) == 1

            data, _ = receiver.recvfrom(1024)
        assert data == packet
