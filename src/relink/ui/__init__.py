"""User interfaces for relink."""
