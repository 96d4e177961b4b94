from __future__ import annotations

MAX_POSITION = 8

INTENSITY_DESCRIPTIONS = {
    1: "Equal importance: both criteria contribute equally to the objective.",
    2: "Between equal and moderate importance.",
    3: "Moderate importance: judgment slightly favors one criterion over the other.",
    4: "Between moderate and strong importance.",
    5: "Strong importance: judgment strongly favors one criterion over the other.",
    6: "Between strong and very strong importance.",
    7: "Very strong importance: one criterion is favored very strongly over the other.",
    8: "Between very strong and extreme importance.",
    9: "Extreme importance: the evidence favoring one criterion is of the highest possible validity.",
}


def ratio_from_position(position: float) -> float:
    """Convert a slider position in [-8, 8] to a judgment ratio.

    Positive positions favor the row criterion, negative ones the column criterion.
    """
    magnitude = min(MAX_POSITION, abs(int(round(position))))
    if position >= 0:
        return float(magnitude + 1)
    return 1.0 / (magnitude + 1)


def position_from_ratio(ratio: float) -> int:
    if ratio <= 0:
        return 0
    if ratio >= 1.0:
        position = int(round(ratio - 1.0))
    else:
        position = -int(round(1.0 / ratio - 1.0))
    return max(-MAX_POSITION, min(MAX_POSITION, position))


def describe_intensity(intensity: float) -> str:
    return INTENSITY_DESCRIPTIONS.get(int(round(intensity)), "")


def preference_text(row_name: str, column_name: str, ratio: float) -> str:
    if ratio > 1.0:
        return f"{row_name} is {round(ratio)}x more important than {column_name}"
    if 0 < ratio < 1.0:
        return f"{column_name} is {round(1.0 / ratio)}x more important than {row_name}"
    return "Both criteria are equally important"
