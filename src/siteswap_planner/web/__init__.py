"""HTTP surface for pattern validation and flight planning."""
