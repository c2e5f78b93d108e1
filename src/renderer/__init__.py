"""Shading, sampling loop and image output."""
