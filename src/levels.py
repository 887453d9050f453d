"""
level rules: grid size, target tile and unlock progression
"""

MAX_LEVEL = 100

# the target tile stops growing at 131072
MAX_TARGET_EXPONENT = 17


def _check_level(level):
    if not 1 <= level <= MAX_LEVEL:
        raise ValueError(f"level must be between 1 and {MAX_LEVEL}, got {level}")


def grid_size_for_level(level):
    """4x4 up to level 5, 5x5 up to level 10, 6x6 after that"""
    _check_level(level)
    if level <= 5:
        return 4
    if level <= 10:
        return 5
    return 6


def target_tile_for_level(level):
    """tile value that wins the level"""
    _check_level(level)
    return 2 ** min(MAX_TARGET_EXPONENT, 11 + level // 5)


def target_score_for_level(level):
    _check_level(level)
    return level * 200


class LevelProgress:
    """which levels the player has unlocked and is currently playing"""

    def __init__(self, highest_unlocked=1, current_level=None):
        _check_level(highest_unlocked)
        self.highest_unlocked = highest_unlocked
        self.current_level = highest_unlocked if current_level is None else current_level
        self.select(self.current_level)

    def is_unlocked(self, level):
        return 1 <= level <= self.highest_unlocked

    def is_completed(self, level):
        return level < self.highest_unlocked

    def select(self, level):
        """switch to an unlocked level"""
        _check_level(level)
        if not self.is_unlocked(level):
            raise ValueError(f"level {level} is locked (highest unlocked: {self.highest_unlocked})")
        self.current_level = level
        return level

    def complete(self, level):
        """
        mark a level as won and unlock the next one

        returns the newly unlocked level, or None if nothing new was unlocked
        """
        _check_level(level)
        next_level = min(MAX_LEVEL, level + 1)
        if next_level <= self.highest_unlocked:
            return None
        self.highest_unlocked = next_level
        return next_level
