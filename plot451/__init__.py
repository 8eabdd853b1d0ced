"""plot451: directories of numeric columns assembled into tables."""
