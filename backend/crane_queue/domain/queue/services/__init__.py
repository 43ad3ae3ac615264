"""Pure domain services for the crane queue."""
