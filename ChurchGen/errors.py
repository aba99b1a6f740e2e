class LayoutError(ValueError):
    """A footprint or opening would come out empty, negative or inverted."""
