"""Tests for renoiseosc.commands.instrument — instrument commands."""

import struct

import pytest

from renoiseosc.commands import instrument
from renoiseosc.commands.base import MAX_VOLUME
from renoiseosc.core.result import SendStatus


def _double(msg: bytes) -> float:
    return struct.unpack(">d", msg[-8:])[0]


class TestVolume:
    def test_clamped_to_max(self, client, sent):
        result = instrument.volume(10.0, client=client)
        assert result.ok
        assert _double(sent()[0]) == 1.9952623149688795

    def test_negative_clamped_to_zero(self, client, sent):
        instrument.volume(-1.0, client=client)
        assert _double(sent()[0]) == 0.0

    def test_in_range_unchanged(self, client, sent):
        instrument.volume(0.5, client=client)
        msg = sent()[0]
        assert msg.startswith(b"/renoise/song/instrument/-1/volume\x00")
        assert _double(msg) == 0.5

    def test_volume_db_clamped(self, client, sent):
        instrument.volume_db(12.0, client=client)
        instrument.volume_db(-3.0, client=client)
        high, low = sent()
        assert _double(high) == 6.0
        assert _double(low) == 0.0

    @pytest.mark.parametrize("func", [instrument.volume, instrument.volume_db])
    def test_nan_rejected(self, client, mock_socket, caplog, func):
        result = func(float("nan"), client=client)

        assert result.status is SendStatus.REJECTED
        assert "must be a number" in result.reason
        mock_socket.sendto.assert_not_called()
        assert "nan" in caplog.text

    def test_string_rejected(self, client, mock_socket):
        assert instrument.volume("loud", client=client).status is SendStatus.REJECTED
        mock_socket.sendto.assert_not_called()

    def test_max_volume_is_plus_6_db(self):
        assert MAX_VOLUME == pytest.approx(10 ** (6 / 20))


class TestInstrumentSelection:
    def test_default_is_selected_instrument(self, client, sent):
        instrument.monophonic(True, client=client)
        assert sent()[0].startswith(b"/renoise/song/instrument/-1/monophonic\x00")

    def test_explicit_instrument(self, client, sent):
        instrument.transpose(12, instrument=3, client=client)
        assert sent()[0].startswith(b"/renoise/song/instrument/3/transpose\x00")


class TestRangedParameters:
    @pytest.mark.parametrize(
        "func, low, high",
        [
            (instrument.monophonic_glide, 0, 255),
            (instrument.phrase_program, 0, 127),
            (instrument.transpose, -120, 120),
        ],
    )
    def test_bounds(self, client, mock_socket, func, low, high):
        assert func(low, client=client).ok
        assert func(high, client=client).ok
        assert func(low - 1, client=client).status is SendStatus.REJECTED
        assert func(high + 1, client=client).status is SendStatus.REJECTED
        assert mock_socket.sendto.call_count == 2

    def test_phrase_program_path(self, client, sent):
        instrument.phrase_program(5, client=client)
        assert sent()[0].startswith(b"/renoise/song/instrument/-1/phrase_program\x00")


class TestEnumeratedParameters:
    @pytest.mark.parametrize("mode", ["None", "Line", "Beat", "Bar"])
    def test_quantization_modes(self, client, sent, mode):
        assert instrument.quantization_mode(mode, client=client).ok
        assert sent()[0].startswith(b"/renoise/song/instrument/-1/quantize\x00")

    def test_unknown_quantization_mode_rejected(self, client, mock_socket, caplog):
        result = instrument.quantization_mode("Pattern", client=client)
        assert result.status is SendStatus.REJECTED
        assert '"Pattern"' in result.reason
        assert "Can't set quantization mode" in caplog.text
        mock_socket.sendto.assert_not_called()

    def test_phrase_playback(self, client, mock_socket):
        assert instrument.phrase_playback("Keymap", client=client).ok
        assert not instrument.phrase_playback("keymap", client=client)
        assert mock_socket.sendto.call_count == 1

    def test_scale_key(self, client, mock_socket):
        assert instrument.scale_key("F#", client=client).ok
        assert not instrument.scale_key("H", client=client)
        assert mock_socket.sendto.call_count == 1

    def test_scale_mode_not_validated(self, client, sent):
        assert instrument.scale_mode("Natural Minor", client=client).ok
        assert b"Natural Minor\x00" in sent()[0]


class TestMacro:
    def test_macro_param(self, client, sent):
        instrument.macro_param(2, 0.25, instrument=1, client=client)
        msg = sent()[0]
        assert msg.startswith(b"/renoise/song/instrument/1/macro2\x00")
        assert _double(msg) == 0.25
