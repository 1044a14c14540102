"""Development seed data."""
