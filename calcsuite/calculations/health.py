"""
Health and Calendar Calculations

BMI with its classification bands, and calendar-aware age difference.
"""

import calendar
from datetime import date
from typing import Optional

from calcsuite.calculations.numbers import is_finite, round_half_up
from calcsuite.models.calculation import AgeResult, BMICategory, BMIResult


# Upper (exclusive) bound of each band; anything above the last is OBESE.
BMI_BANDS: tuple[tuple[float, BMICategory], ...] = (
    (18.5, BMICategory.UNDERWEIGHT),
    (24.9, BMICategory.NORMAL),
    (29.9, BMICategory.OVERWEIGHT),
)


def classify_bmi(value: float) -> BMICategory:
    for upper, category in BMI_BANDS:
        if value < upper:
            return category
    return BMICategory.OBESE


def bmi(weight_kg: float, height_cm: float) -> Optional[BMIResult]:
    """
    Body mass index, rounded to one decimal.

    The band is chosen from the rounded value, which is the one shown.
    """
    if not is_finite(weight_kg, height_cm) or weight_kg <= 0 or height_cm <= 0:
        return None

    height_m = height_cm / 100
    value = round_half_up(weight_kg / (height_m * height_m), 1)
    return BMIResult(bmi=value, category=classify_bmi(value))


def age_difference(start: date, end: date) -> Optional[AgeResult]:
    """
    Calendar difference end - start in years, months and days.

    Components are subtracted one by one. A negative day count borrows
    one month worth the length of the start date's month (the days left
    in the starting month plus the days elapsed in the ending month).
    A negative month count then borrows twelve months from the years.
    """
    if end < start:
        return None

    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day

    if days < 0:
        months -= 1
        days += calendar.monthrange(start.year, start.month)[1]
    if months < 0:
        years -= 1
        months += 12

    return AgeResult(years=years, months=months, days=days)
