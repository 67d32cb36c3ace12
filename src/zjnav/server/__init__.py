"""zjnav daemon."""
