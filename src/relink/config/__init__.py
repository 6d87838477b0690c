"""Configuration package for relink."""
