from __future__ import annotations

import math


MPS_TO_MPH = 2.237


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def mps_to_mph(speed_mps: float) -> float:
    return speed_mps * MPS_TO_MPH
