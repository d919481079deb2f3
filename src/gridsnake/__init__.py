"""Grid snake built on pygame."""
