# tek/constants.py

"""Shared constants for the tek package."""

# Every cached, derived file lives below a directory ending in this segment.
CACHE_DIR_MARKER = ".tek_cache/"

# Suffix produced by every conversion; always removed as exactly 4 characters.
PDF_SUFFIX = ".pdf"

# Appended to the claimed filename when the converter output still needs cropping
TOCROP_SUFFIX = "-tocrop.pdf"

# Progress labels printed by named commands
TAG_CONVERT = "CONVERT"
TAG_INKCONV = "INKCONV"
TAG_CROP = "CROP"
TAG_IMGCP = "IMGCP"
