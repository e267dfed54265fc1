"""Window and drawing constants."""

TITLE = "scroll"

BG_COLOR = (0, 0, 0)

# Colour depth images are normalised to before smooth scaling
IMAGE_DEPTH = 32
