"""Formatting and color helpers for the timer window"""

import colorsys
import random

IDLE_BACKGROUND = "#ffffff"


def format_time(seconds):
    mins, secs = divmod(max(0, int(seconds)), 60)
    return f"{mins:02d}:{secs:02d}"


def random_background(saturation=0.7, lightness=0.8, rng=None):
    """Pastel color with a random hue, as #rrggbb"""
    rng = rng or random
    hue = rng.randrange(360) / 360.0
    r, g, b = colorsys.hls_to_rgb(hue, lightness, saturation)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))
