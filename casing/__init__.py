"""Unicode-aware word segmentation and case styles."""
