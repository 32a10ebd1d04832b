"""Statement text parsing: segmentation, field extraction, and sign resolution."""
