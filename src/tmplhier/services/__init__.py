"""Service layer — request-level operations returning ServiceResult."""
