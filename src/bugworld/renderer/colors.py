"""Color definitions for the renderer."""

# Background
BG_DARK = (28, 28, 32)
BG_SIDEBAR = (38, 38, 45)

# World background - earthy tones
WORLD_BG = (62, 54, 45)
WORLD_ORIGIN = (90, 80, 66)

# Bugs - color based on how well fed they are
BUG_FED = (64, 224, 208)  # Turquoise
BUG_HUNGRY = (255, 165, 0)  # Orange
BUG_STARVING = (220, 20, 60)  # Crimson
BUG_OUTLINE = (20, 20, 24)

# Food
FOOD_COLOR = (124, 252, 0)  # Lawn green
FOOD_DEPLETED = (60, 120, 0)  # Darker green

# UI
TEXT_PRIMARY = (240, 240, 245)
TEXT_SECONDARY = (160, 160, 170)
TEXT_ACCENT = (100, 200, 255)
DIVIDER = (60, 60, 70)


def lerp_color(
    color1: tuple[int, int, int],
    color2: tuple[int, int, int],
    t: float,
) -> tuple[int, int, int]:
    """Linearly interpolate between two colors."""
    t = max(0.0, min(1.0, t))
    return (
        int(color1[0] + (color2[0] - color1[0]) * t),
        int(color1[1] + (color2[1] - color1[1]) * t),
        int(color1[2] + (color2[2] - color1[2]) * t),
    )


def get_bug_color(nutrition: float, mass: float) -> tuple[int, int, int]:
    """Get the color for a bug from its nutrition relative to its mass."""
    if mass <= 0:
        return BUG_FED if nutrition > 0 else BUG_STARVING

    fed = nutrition / mass
    if fed > 1.0:
        return BUG_FED
    elif fed > 0.5:
        return lerp_color(BUG_HUNGRY, BUG_FED, (fed - 0.5) / 0.5)
    else:
        return lerp_color(BUG_STARVING, BUG_HUNGRY, fed / 0.5)


def get_food_color(quantity: float) -> tuple[int, int, int]:
    """Get the color for food, dimming as it is eaten."""
    return lerp_color(FOOD_DEPLETED, FOOD_COLOR, quantity)
