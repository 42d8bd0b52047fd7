"""Service layer — wraps the naming core in ServiceResult contracts."""
