from .policy import MISMATCH_PAD, MISMATCH_RAISE, RangePlanner, RangePolicy

__all__ = ["MISMATCH_PAD", "MISMATCH_RAISE", "RangePlanner", "RangePolicy"]
