# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.

"""Tests for DelaySettings"""
from __future__ import annotations

import dataclasses
from typing import Optional

import pytest

from unilog.delay import DelaySettings, UsageError


class TestFromArgs:
    def test_defaults(self):
        # WHEN
        settings = DelaySettings.from_args()

        # THEN
        assert settings.num_lines == 5
        assert settings.delay == 5
        assert settings.message == "this is a default (sheddableplus)\n"

    def test_defaults_match_explicit_values(self):
        # WHEN / THEN
        assert DelaySettings.from_args() == DelaySettings.from_args("5", "5")

    def test_num_lines_only(self):
        # WHEN
        settings = DelaySettings.from_args("2")

        # THEN
        assert settings.num_lines == 2
        assert settings.delay == 5

    def test_num_lines_and_delay(self):
        # WHEN
        settings = DelaySettings.from_args("2", "1")

        # THEN
        assert settings.num_lines == 2
        assert settings.delay == 1

    @pytest.mark.parametrize(
        ("num_lines", "delay"),
        [
            pytest.param("0", None, id="zero-num-lines"),
            pytest.param("1", "0", id="zero-delay"),
            pytest.param("abc", None, id="non-numeric-num-lines"),
            pytest.param("1", "soon", id="non-numeric-delay"),
            pytest.param("", None, id="empty-num-lines"),
            pytest.param("-3", None, id="negative-num-lines"),
            pytest.param("2", "-1", id="negative-delay"),
            pytest.param("1.5", None, id="float-num-lines"),
            pytest.param("2", "99999999999999999999", id="oversized-delay"),
            pytest.param("2", "2147483648", id="delay-past-int-range"),
            pytest.param("2147483648", None, id="num-lines-past-int-range"),
        ],
    )
    def test_rejects_invalid_values(self, num_lines: str, delay: Optional[str]):
        # WHEN
        with pytest.raises(UsageError):
            DelaySettings.from_args(num_lines, delay)


class TestDelaySettings:
    def test_is_frozen(self):
        # GIVEN
        settings = DelaySettings()

        # WHEN
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.delay = 1  # type: ignore[misc]

    def test_rejects_zero_delay_on_construction(self):
        # WHEN
        with pytest.raises(UsageError) as raised:
            DelaySettings(num_lines=1, delay=0)

        # THEN
        assert "delay" in str(raised.value)

    def test_accepts_largest_int_delay(self):
        # WHEN
        settings = DelaySettings.from_args("1", "2147483647")

        # THEN
        assert settings.delay == 2**31 - 1

    def test_rejects_oversized_delay_on_construction(self):
        # WHEN
        with pytest.raises(UsageError) as raised:
            DelaySettings(num_lines=1, delay=2**31)

        # THEN
        assert "delay" in str(raised.value)

    def test_usage_error_is_value_error(self):
        # WHEN / THEN
        with pytest.raises(ValueError):
            DelaySettings(num_lines=0)

    def test_to_dict(self):
        # WHEN
        result = DelaySettings(num_lines=3, delay=2).to_dict()

        # THEN
        assert result == {
            "num_lines": 3,
            "delay": 2,
            "message": "this is a default (sheddableplus)\n",
        }
