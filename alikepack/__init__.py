"""Internal building blocks for AlikeKit."""
