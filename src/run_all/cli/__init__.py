"""CLI layer — entry points, error boundary, and plan rendering."""
