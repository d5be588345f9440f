"""HTTP boundary for the workout engine."""
