"""Domain layer — models and errors."""
