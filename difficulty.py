from typing import NamedTuple, Tuple


class DifficultyProfile(NamedTuple):
    distance_range: Tuple[int, int]  # horizontal gap between pairs, inclusive
    opening_range: Tuple[int, int]   # vertical opening inside a pair, inclusive


DIFFICULTIES = {
    "easy": DifficultyProfile(distance_range=(300, 350), opening_range=(150, 250)),
    "normal": DifficultyProfile(distance_range=(280, 330), opening_range=(140, 190)),
    "hard": DifficultyProfile(distance_range=(250, 310), opening_range=(120, 170)),
}

NORMAL_AT = 10
HARD_AT = 20


def tier_for(score: int) -> str:
    """
    Returns the difficulty tier name for a score.
    - score < 10  → easy
    - score < 20  → normal
    - otherwise   → hard
    """
    if score >= HARD_AT:
        return "hard"
    if score >= NORMAL_AT:
        return "normal"
    return "easy"


def profile_for(score: int) -> DifficultyProfile:
    return DIFFICULTIES[tier_for(score)]


def validate_difficulties(field_height: int, margin: int, difficulties=None):
    """Check every profile once at startup. Raises ValueError on bad config."""
    difficulties = DIFFICULTIES if difficulties is None else difficulties
    max_opening = field_height - 2 * margin
    for name, profile in difficulties.items():
        for label, (low, high) in (("distance", profile.distance_range),
                                   ("opening", profile.opening_range)):
            if low > high:
                raise ValueError(f"{name}: {label} range {low}..{high} is empty")
        if profile.opening_range[1] > max_opening:
            raise ValueError(
                f"{name}: opening up to {profile.opening_range[1]} does not fit "
                f"a field of height {field_height} with margin {margin}"
            )
