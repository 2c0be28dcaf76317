"""Tests for renoiseosc.cli — command line entry point."""

import json
from unittest.mock import patch

import pytest

from renoiseosc import cli


@pytest.fixture(autouse=True)
def no_default_config(tmp_path):
    with patch.object(cli, "DEFAULT_CONFIG", tmp_path / "absent.json"):
        yield


class TestParseValue:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("132", 132),
            ("-50", -50),
            ("0.5", 0.5),
            ("true", True),
            ("False", False),
            ("Off", "Off"),
            ("Keymap", "Keymap"),
        ],
    )
    def test_values(self, text, expected):
        assert cli.parse_value(text) == expected
        assert type(cli.parse_value(text)) is type(expected)


class TestParseTagged:
    def test_converts_by_tag(self):
        values = cli.parse_tagged("ihfds", ["1", "2", "0.5", "3", "7"])
        assert values == [1, 2, 0.5, 3.0, "7"]
        assert type(values[3]) is float

    def test_boolean_slots_optional(self):
        assert cli.parse_tagged("TsF", ["7"]) == ["7"]
        assert cli.parse_tagged("TsF", ["true", "7", "false"]) == [True, "7", False]

    def test_hex_bytes(self):
        assert cli.parse_tagged("mb", ["00903c7f", "cafe"]) == [b"\x00\x90<\x7f", b"\xca\xfe"]

    def test_extra_values_kept(self):
        assert cli.parse_tagged("i", ["1", "2", "3"]) == [1, "2", "3"]

    def test_bad_number_raises(self):
        with pytest.raises(ValueError):
            cli.parse_tagged("i", ["abc"])


class TestMain:
    def test_tempo_sent(self, mock_socket):
        assert cli.main(["tempo", "132"]) == 0
        data, addr = mock_socket.sendto.call_args.args
        assert data.endswith(b"\x00\x00\x00\x84")
        assert addr == ("127.0.0.1", 8000)

    def test_rejected_exit_code(self, mock_socket):
        assert cli.main(["tempo", "1000"]) == 1
        mock_socket.sendto.assert_not_called()

    def test_host_and_port_override(self, mock_socket):
        assert cli.main(["--host", "10.0.0.3", "--port", "8001", "start"]) == 0
        assert mock_socket.sendto.call_args.args[1] == ("10.0.0.3", 8001)

    def test_selection_after_args(self, mock_socket):
        assert cli.main(["prefx-panning", "-20", "--track", "2"]) == 0
        data = mock_socket.sendto.call_args.args[0]
        assert data.startswith(b"/renoise/song/track/2/prefx_panning\x00")

    def test_config_file(self, mock_socket, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"host": "10.0.0.4", "port": 9000, "root": "/r"}))
        assert cli.main(["--config", str(path), "stop"]) == 0
        data, addr = mock_socket.sendto.call_args.args
        assert data.startswith(b"/r/transport/stop\x00")
        assert addr == ("10.0.0.4", 9000)

    def test_bad_config_exit_code(self, mock_socket, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{")
        assert cli.main(["--config", str(path), "stop"]) == 2

    def test_raw_send(self, mock_socket):
        assert cli.main(["send", "/renoise/song/bpm", "i", "132"]) == 0
        data = mock_socket.sendto.call_args.args[0]
        assert data == b"/renoise/song/bpm\x00\x00\x00,i\x00\x00\x00\x00\x00\x84"

    def test_raw_send_bad_tags(self, mock_socket):
        assert cli.main(["send", "/renoise/song/bpm", "ii", "132"]) == 2
        mock_socket.sendto.assert_not_called()

    def test_unknown_command(self, mock_socket):
        assert cli.main(["rewind"]) == 2

    def test_wrong_argument_count(self, mock_socket):
        assert cli.main(["tempo"]) == 2

    def test_transport_error_exit_code(self, mock_socket):
        mock_socket.sendto.side_effect = OSError("Network is unreachable")
        assert cli.main(["start"]) == 1

    def test_list(self, capsys):
        assert cli.main(["list"]) == 0
        out = capsys.readouterr().out.split()
        assert "tempo" in out
        assert "prefx-volume-db" in out

    def test_raw_send_numeric_string(self, mock_socket):
        assert cli.main(["send", "/renoise/song/instrument/-1/scale_mode", "s", "7"]) == 0
        data = mock_socket.sendto.call_args.args[0]
        assert data.endswith(b",s\x00\x007\x00\x00\x00")

    def test_raw_send_float_tag(self, mock_socket):
        assert cli.main(["send", "/renoise/song/track/1/prefx_volume", "d", "1"]) == 0
        data = mock_socket.sendto.call_args.args[0]
        assert data.endswith(b",d\x00\x00?\xf0\x00\x00\x00\x00\x00\x00")

    def test_raw_send_unparsable_value(self, mock_socket):
        assert cli.main(["send", "/renoise/song/bpm", "i", "fast"]) == 2
        mock_socket.sendto.assert_not_called()

    def test_evaluate_numeric_expression(self, mock_socket):
        assert cli.main(["evaluate", "1"]) == 0
        data = mock_socket.sendto.call_args.args[0]
        assert data == b"/renoise/evaluate\x00\x00\x00,s\x00\x001\x00\x00\x00"

    def test_set_parameter_by_name_and_index(self, mock_socket):
        assert cli.main(["set-parameter", "Cutoff", "0.5"]) == 0
        assert b"set_parameter_by_name\x00" in mock_socket.sendto.call_args.args[0]
        assert cli.main(["set-parameter", "3", "0.5"]) == 0
        assert b"set_parameter_by_index\x00" in mock_socket.sendto.call_args.args[0]

    def test_non_numeric_value_rejected(self, mock_socket):
        assert cli.main(["tempo", "fast"]) == 1
        mock_socket.sendto.assert_not_called()
