"""Domain values and errors for track relocation."""
