"""Tests for sentence framing over a byte source."""

import pytest

from gpsfix import ChecksumError, FieldFormatError, FrameError, RawSentence
from gpsfix.nmea.reader import BufferByteSource, parse_sentence, read_sentence
from tests.helpers import GGA, GSV, RMC, RecordingByteSource, frame, stream


class TestReadSentence:
    def test_returns_raw_sentence(self):
        sentence = read_sentence(BufferByteSource(stream(RMC)))
        assert isinstance(sentence, RawSentence)
        assert sentence.talker_and_type == "GPRMC"
        assert sentence.sentence_type == "RMC"

    def test_fields_equal_comma_split_of_body(self):
        body = RMC[1 : RMC.index("*")]
        sentence = read_sentence(BufferByteSource(stream(RMC)))
        assert sentence.fields == body.split(",")
        assert sentence.fields[0] == sentence.talker_and_type

    def test_empty_fields_preserved(self):
        sentence = read_sentence(BufferByteSource(stream(RMC)))
        assert sentence.fields[10:] == ["", "", "D"]

    @pytest.mark.parametrize(
        "body",
        [
            "GPGGA",
            "GPXXX,,,",
            "GPTXT,01,01,02,ANTSTATUS=OK",
            "GPGGA,034056.000,3959.0498,N,10515.2269,W,2,06,1.21,1648.2,M,-20.6,M,0000,0000",
        ],
    )
    def test_any_body_with_correct_checksum(self, body):
        sentence = read_sentence(BufferByteSource(frame(body).encode("ascii")))
        assert sentence.fields == body.split(",")

    def test_discards_partial_sentence_after_cold_start(self):
        data = b"0515.2269,W,0.10,106.02,190415,,,D*7D\r\n" + stream(GGA)
        sentence = read_sentence(BufferByteSource(data))
        assert sentence.talker_and_type == "GPGGA"

    def test_reads_consecutive_sentences(self):
        source = BufferByteSource(stream(GSV, GGA, RMC))
        types = [read_sentence(source).talker_and_type for _ in range(3)]
        assert types == ["GPGSV", "GPGGA", "GPRMC"]

    def test_stops_after_checksum_digits(self):
        source = RecordingByteSource(stream(RMC))
        read_sentence(source)
        assert source.bytes_read == len(RMC)

    def test_flipped_checksum_digit_raises(self):
        for position in (-2, -1):
            digits = list(RMC)
            digits[position] = "0" if digits[position] != "0" else "1"
            corrupted = "".join(digits)
            with pytest.raises(ChecksumError) as excinfo:
                read_sentence(BufferByteSource(corrupted.encode("ascii")))
            assert excinfo.value.computed == 0x7D
            assert excinfo.value.expected != excinfo.value.computed

    def test_corrupted_body_raises(self):
        corrupted = RMC.replace("3959", "3958")
        with pytest.raises(ChecksumError) as excinfo:
            read_sentence(BufferByteSource(corrupted.encode("ascii")))
        assert excinfo.value.expected == 0x7D

    def test_checksum_error_message_has_both_values(self):
        with pytest.raises(ChecksumError, match="computed 0x7D, expected 0xFF"):
            read_sentence(BufferByteSource((RMC[:-2] + "FF").encode("ascii")))

    def test_non_hex_checksum_raises_field_format_error(self):
        with pytest.raises(FieldFormatError) as excinfo:
            read_sentence(BufferByteSource((RMC[:-2] + "ZZ").encode("ascii")))
        assert excinfo.value.field_name == "checksum"

    def test_eof_before_start_marker(self):
        with pytest.raises(FrameError):
            read_sentence(BufferByteSource(b"garbage without a start"))

    def test_eof_inside_body(self):
        with pytest.raises(FrameError):
            read_sentence(BufferByteSource(RMC[:30].encode("ascii")))

    def test_eof_inside_checksum(self):
        with pytest.raises(FrameError):
            read_sentence(BufferByteSource(RMC[:-1].encode("ascii")))

    def test_read_failure_aborts_without_retry(self):
        source = RecordingByteSource(stream(RMC, GGA), fail_at=10)
        with pytest.raises(FrameError, match="simulated"):
            read_sentence(source)
        assert source.bytes_read == 10

    def test_non_ascii_body_raises_frame_error(self):
        body = b"GP\xc3\xa9,1"
        checksum = 0
        for byte in body:
            checksum ^= byte
        data = b"$" + body + b"*" + f"{checksum:02X}".encode("ascii")
        with pytest.raises(FrameError):
            read_sentence(BufferByteSource(data))


class TestParseSentence:
    def test_parses_logged_line(self):
        sentence = parse_sentence(GGA + "\r\n")
        assert sentence.talker_and_type == "GPGGA"
        assert sentence.fields[9] == "1648.2"

    def test_ignores_leading_noise(self):
        assert parse_sentence("xx" + RMC).talker_and_type == "GPRMC"

    def test_truncated_line(self):
        with pytest.raises(FrameError):
            parse_sentence(RMC[:-2])

    def test_non_ascii_text(self):
        with pytest.raises(FrameError):
            parse_sentence("$GPRMC,é*00")
