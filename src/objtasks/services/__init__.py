"""Service layer — domain calls wrapped in ServiceResult."""
