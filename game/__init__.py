"""Rules engine for the marble draw token race."""
