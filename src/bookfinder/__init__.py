# ABOUTME: Bookfinder looks up book metadata on Google Books and picks the best match.
# ABOUTME: Package version lives here; the public API is re-exported from bookfinder.metadata.

__version__ = "0.1.0"
