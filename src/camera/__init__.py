"""Camera models producing rays for viewport coordinates."""
