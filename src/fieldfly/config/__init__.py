"""fieldfly configuration property classes."""
