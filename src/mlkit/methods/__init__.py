"""Model methods built on the mlkit kernel layer."""
