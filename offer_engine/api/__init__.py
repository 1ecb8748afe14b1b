"""HTTP surface for the offer engine."""
