"""Event management backend with scheduled reminder notifications."""
