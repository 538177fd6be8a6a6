from unittest.mock import patch

import pytest

from n2k_decoder.core.errors import MalformedPayloadError
from n2k_decoder.core.models import HeadingReference, VesselHeading, WindData, WindReference
from n2k_decoder.core.pgns import PGNDecoder, VesselHeadingDecoder, WindDataDecoder


class TestWindDataDecoder:
    @pytest.fixture
    def decoder(self):
        return WindDataDecoder()

    def test_decode_sample(self, decoder):
        record = decoder.decode(bytes([64, 15, 0, 102, 108, 248, 255, 255]))

        assert isinstance(record, WindData)
        assert record.sequence_id == 64
        assert record.wind_speed == 15 * 0.01
        assert record.wind_direction == (102 | 108 << 8) * 0.0001
        assert record.wind_reference == 0
        assert record.reference is WindReference.TRUE_NORTH
        assert record.reserved == 31

    def test_minimum_payload(self, decoder):
        assert decoder.min_length == 6
        record = decoder.decode(bytes([1, 0, 1, 0, 1, 2]))
        assert record.wind_speed == 256 * 0.01
        assert record.wind_reference == 2
        assert record.reference is WindReference.APPARENT

    def test_unavailable_fields(self, decoder):
        """All-ones fields come back as None, never as a scaled number"""
        record = decoder.decode(bytes([0xFF] * 6))

        assert record.sequence_id is None
        assert record.wind_speed is None
        assert record.wind_direction is None
        assert record.wind_reference is None
        assert record.reference is None
        assert record.reserved == 31

    def test_reference_ignores_reserved_bits(self, decoder):
        for high in range(32):
            record = decoder.decode(bytes([0, 0, 0, 0, 0, (high << 3) | 3]))
            assert record.wind_reference == 3
            assert record.reserved == high

    def test_zero_is_not_unavailable(self, decoder):
        record = decoder.decode(bytes(6))
        assert record.wind_speed == 0.0
        assert record.wind_direction == 0.0
        assert record.sequence_id == 0

    @pytest.mark.parametrize("length", [0, 1, 5])
    def test_short_payload(self, decoder, length):
        with pytest.raises(MalformedPayloadError) as exc_info:
            decoder.decode(bytes(length))
        assert exc_info.value.pgn == 130306
        assert exc_info.value.required == 6
        assert exc_info.value.length == length

    @patch("n2k_decoder.core.pgns.logger")
    def test_out_of_range_is_logged_not_raised(self, mock_logger, decoder):
        record = decoder.decode(bytes([0, 0xFE, 0xFF, 0, 0, 0]))

        assert record.wind_speed == 0xFFFE * 0.01
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.kwargs["field"] == "wind_speed"

    def test_undefined_reference_code(self, decoder):
        record = decoder.decode(bytes([0, 0, 0, 0, 0, 5]))
        assert record.wind_reference == 5
        assert record.reference is None

    def test_idempotent(self, decoder):
        payload = bytes([64, 15, 0, 102, 108, 248, 255, 255])
        assert decoder.decode(payload) == decoder.decode(payload)


class TestVesselHeadingDecoder:
    @pytest.fixture
    def decoder(self):
        return VesselHeadingDecoder()

    def test_decode(self, decoder):
        payload = bytes([1]) + (12345).to_bytes(2, "little") + (-100 & 0xFFFF).to_bytes(2, "little") \
            + bytes([0xFF, 0x7F, 0xFD])
        record = decoder.decode(payload)

        assert isinstance(record, VesselHeading)
        assert record.sequence_id == 1
        assert record.heading == 12345 * 0.0001
        assert record.deviation == -100 * 0.0001
        assert record.variation is None
        assert record.heading_reference == 1
        assert record.reference is HeadingReference.MAGNETIC
        assert record.reserved == 63

    def test_short_payload(self, decoder):
        with pytest.raises(MalformedPayloadError) as exc_info:
            decoder.decode(bytes(7))
        assert exc_info.value.pgn == 127250
        assert exc_info.value.required == 8

    def test_reference_unavailable(self, decoder):
        record = decoder.decode(bytes(7) + bytes([0x03]))
        assert record.heading_reference is None
        assert record.reference is None


class TestPGNDecoderBase:
    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            PGNDecoder()

    def test_subclass_without_fields_cannot_be_instantiated(self):
        class Incomplete(PGNDecoder):
            pgn = 1
            name = "Incomplete"
            record_type = WindData

        with pytest.raises(TypeError):
            Incomplete()

    def test_fields_as_class_attribute(self):
        assert WindDataDecoder().fields is WindDataDecoder.fields
