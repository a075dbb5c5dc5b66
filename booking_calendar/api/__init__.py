"""HTTP service exposing the calendar layout engine."""
