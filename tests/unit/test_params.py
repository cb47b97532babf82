#!/usr/bin/env python3
"""Tests for query parameter resolution."""

import pytest

from prayer_ics.services.params import parse_int, resolve_alarm, resolve_horizon, resolve_params


def test_defaults_when_nothing_given():
    params = resolve_params({})

    assert params.location.lat == pytest.approx(48.8566)
    assert params.location.lon == pytest.approx(2.3522)
    assert params.method == "12"
    assert params.school == "0"
    assert params.latitude_adjustment_method == "3"
    assert params.tune == ""
    assert params.horizon == 365
    assert params.alarm is None
    assert params.location.label == ""


def test_query_coordinates_win_over_headers():
    params = resolve_params({"lat": "51.5074", "lon": "-0.1278"}, "40.0", "-3.0")

    assert params.location.lat == pytest.approx(51.5074)
    assert params.location.lon == pytest.approx(-0.1278)


def test_headers_used_when_query_missing_or_invalid():
    params = resolve_params({"lat": "north", "lon": "nan"}, "40.4168", "-3.7038")

    assert params.location.lat == pytest.approx(40.4168)
    assert params.location.lon == pytest.approx(-3.7038)


def test_default_when_header_is_garbage():
    params = resolve_params({}, "", "inf")

    assert params.location.lat == pytest.approx(48.8566)
    assert params.location.lon == pytest.approx(2.3522)


def test_passthrough_strings_keep_empty_values():
    params = resolve_params({"method": "", "school": "1", "latitudeAdjustmentMethod": "1", "tune": "0,2,0,0,0,0,0,0,0"})

    assert params.method == ""
    assert params.school == "1"
    assert params.latitude_adjustment_method == "1"
    assert params.tune == "0,2,0,0,0,0,0,0,0"


def test_location_label():
    params = resolve_params({"city": "Lyon", "country": ""})
    assert params.location.label == "Lyon"

    params = resolve_params({"city": "Lyon", "country": "France"})
    assert params.location.label == "Lyon, France"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 365),
        ("", 365),
        ("abc", 365),
        ("0", 365),
        ("-5", 365),
        ("31", 31),
        ("45days", 45),
        ("400", 400),
        ("1000", 400),
    ],
)
def test_resolve_horizon(raw, expected):
    assert resolve_horizon(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, None),
        ("", None),
        ("soon", None),
        ("0", 0),
        ("10", 10),
        ("-15", 0),
    ],
)
def test_resolve_alarm(raw, expected):
    assert resolve_alarm(raw) == expected


def test_zero_alarm_is_not_dropped():
    assert resolve_params({"alarm": "0"}).alarm == 0
    assert resolve_params({"alarm": ""}).alarm is None


def test_parse_int_leading_digits():
    assert parse_int(" 12 ") == 12
    assert parse_int("+7") == 7
    assert parse_int("x12") is None
