"""Configuration, logging and database helpers shared by the application."""
