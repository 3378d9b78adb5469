"""termpipes: a single hue-cycling pipe wandering around the terminal.

    python -m termpipes            (50 ms per frame)
    python -m termpipes 20         (20 ms per frame)
    python -m termpipes 80 --glyphs light --seed 7
"""

__version__ = "0.1.0"
