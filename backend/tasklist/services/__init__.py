"""Service Layer — orchestrates core logic against the task repository."""
