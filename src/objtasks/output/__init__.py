"""Output formatting for ServiceResult."""
