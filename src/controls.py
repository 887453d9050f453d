"""
translate keyboard and swipe input into move directions
"""
import pygame


KEY_DIRECTIONS = {
    pygame.K_UP: 'up',
    pygame.K_DOWN: 'down',
    pygame.K_LEFT: 'left',
    pygame.K_RIGHT: 'right',
}

# minimum drag distance in pixels before a swipe counts
SWIPE_THRESHOLD = 30


def key_direction(key):
    """direction for a pygame key code, or None"""
    return KEY_DIRECTIONS.get(key)


def swipe_direction(dx, dy, threshold=SWIPE_THRESHOLD):
    """
    direction of a drag gesture, or None if it was too short

    the dominant axis wins; screen y grows downwards
    """
    if abs(dx) <= threshold and abs(dy) <= threshold:
        return None
    if abs(dx) > abs(dy):
        return 'right' if dx > 0 else 'left'
    return 'down' if dy > 0 else 'up'
