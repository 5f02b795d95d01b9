"""Metric to imperial conversions used when re-rendering a forecast."""

KMH_TO_MPH = 0.621371
MM_PER_INCH = 25.4


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def kmh_to_mph(kmh: float) -> float:
    return kmh * KMH_TO_MPH


def mm_to_inches(mm: float) -> float:
    return mm / MM_PER_INCH
