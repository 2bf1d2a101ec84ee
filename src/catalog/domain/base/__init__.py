"""Base domain building blocks shared by every aggregate."""
