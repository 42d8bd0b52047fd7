"""Infrastructure layer — in-memory collaborators of the naming core."""
