"""Infrastructure helpers shared by features and the UI."""
