"""Domain layer interfaces."""
