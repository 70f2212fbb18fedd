"""Command-line driver for the gradient PPM generator."""
