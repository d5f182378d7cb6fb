"""HR management CRUD API."""
