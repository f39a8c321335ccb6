"""Service layer — operations over domains returning ServiceResult."""
