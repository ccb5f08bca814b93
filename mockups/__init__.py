"""Artwork preview rendering: composite artwork onto product mockup templates."""
