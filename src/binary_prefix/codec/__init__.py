"""Key <-> bit-sequence conversions."""
