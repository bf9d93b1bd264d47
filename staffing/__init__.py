"""staffing - employee matching and workflow generation for client requests."""
