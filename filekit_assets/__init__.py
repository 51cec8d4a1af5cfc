"""Resources bundled with FileKit."""
