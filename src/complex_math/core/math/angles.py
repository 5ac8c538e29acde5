"""
Angles — Конверсия единиц угла

Единственный допустимый способ преобразований между:
- radians (аргумент комплексного числа, math.atan2/cos/sin)
- degrees (человекочитаемая форма)
"""

import math


def to_degrees(radians: float) -> float:
    """
    Конверсия: радианы → градусы

    Формула: degrees = radians * 180 / π

    Args:
        radians: Угол в радианах

    Returns:
        Угол в градусах
    """
    return radians * 180 / math.pi


def to_radians(degrees: float) -> float:
    """
    Конверсия: градусы → радианы

    Формула: radians = degrees * π / 180

    Args:
        degrees: Угол в градусах

    Returns:
        Угол в радианах
    """
    return degrees * math.pi / 180
