"""Tests for ukgridref.grammar module."""

import pytest

from ukgridref.exceptions import (
    MalformedReference,
    UKGridRefError,
    UnknownMyriad,
)
from ukgridref.grammar import normalise, parse_grid_ref, split, validate
from ukgridref.models import GridRef


class TestParse:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("TQ", GridRef("TQ")),
            ("TQ12", GridRef("TQ", "1", "2")),
            ("TQ1234", GridRef("TQ", "12", "34")),
            ("TQ123456", GridRef("TQ", "123", "456")),
            ("TQ12345678", GridRef("TQ", "1234", "5678")),
            ("TQ1234567890", GridRef("TQ", "12345", "67890")),
            ("TQ 30695 80671", GridRef("TQ", "30695", "80671")),
            ("TQ3069580671", GridRef("TQ", "30695", "80671")),
            ("TQ 3069580671", GridRef("TQ", "30695", "80671")),
            ("TQ30695 80671", GridRef("TQ", "30695", "80671")),
            ("SP0886", GridRef("SP", "08", "86")),
            ("XD 00 00", GridRef("XD", "00", "00")),
            ("HF 1 2", GridRef("HF", "1", "2")),
        ],
    )
    def test_valid(self, raw: str, expected: GridRef):
        assert parse_grid_ref(raw) == expected

    def test_from_string_matches_parse(self):
        assert GridRef.from_string("NN 166 712") == parse_grid_ref("NN166712")

    @pytest.mark.parametrize(
        "bad",
        [
            "",
            "1",
            "T",
            "TQ1",
            "TQ123",
            "TQ12345",
            "TQ1234567",
            "TQ12345678901",
            "TQ1234567890133",
            "tq12",
            "TQ  1234",
            " TQ1234",
            "TQ1234 ",
            "TQ 12 345",
            "TQ12a4",
            "AA1234",
            "TQ\n",
            "TQ12\n",
        ],
    )
    def test_malformed(self, bad: str):
        with pytest.raises(MalformedReference) as exc_info:
            parse_grid_ref(bad)
        assert exc_info.value.reference == bad

    @pytest.mark.parametrize("bad", ["AA", "ZZ", "SI", "tq", "T1", "  "])
    def test_bare_pair_unknown_myriad(self, bad: str):
        with pytest.raises(UnknownMyriad) as exc_info:
            parse_grid_ref(bad)
        assert exc_info.value.myriad == bad
        assert exc_info.value.reference == bad

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(MalformedReference):
            parse_grid_ref("TQ１２３４")

    def test_errors_share_base(self):
        with pytest.raises(UKGridRefError):
            parse_grid_ref("nonsense")
        with pytest.raises(ValueError):
            parse_grid_ref("nonsense")


class TestSplit:
    def test_bare_pair_is_not_checked(self):
        assert split("ZZ") == ("ZZ", "", "")

    def test_digit_groups(self):
        assert split("SH 123 124") == ("SH", "123", "124")

    def test_mismatched_lengths_cannot_match(self):
        with pytest.raises(MalformedReference):
            split("SH 1234 124")


class TestValidate:
    @pytest.mark.parametrize("raw", ["TQ", "XA", "JH", "TG 51409 13177", "NT2673"])
    def test_valid(self, raw: str):
        assert validate(raw) is True

    @pytest.mark.parametrize("raw", ["", "tq", "AA", "TQ1", "TQ 1 23"])
    def test_invalid(self, raw: str):
        assert validate(raw) is False


class TestNormalise:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("tq3069580671", "TQ 30695 80671"),
            ("  TQ   30695   80671 ", "TQ 30695 80671"),
            ("sp 0886", "SP 08 86"),
            ("tq", "TQ"),
            ("TQ 30695 80671", "TQ 30695 80671"),
        ],
    )
    def test_normalise_formats_correctly(self, raw: str, expected: str):
        assert normalise(raw) == expected

    @pytest.mark.parametrize("bad", ["", "zz", "TQ1", "TQ 12 3456"])
    def test_normalise_raises_on_invalid(self, bad: str):
        with pytest.raises(UKGridRefError):
            normalise(bad)


@pytest.mark.parametrize(
    "raw",
    ["TQ", "TQ 1 2", "TQ 12 34", "TQ 123 456", "TQ 1234 5678", "XD 92356 20839"],
)
def test_format_round_trip(raw: str):
    assert parse_grid_ref(raw).format() == raw
    assert parse_grid_ref(raw.replace(" ", "")).format() == raw
