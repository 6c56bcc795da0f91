"""Django project package for the collection reminder service."""
