"""Configuration, logging and data loading shared by the application."""
