"""Vector, ray and helper types."""
