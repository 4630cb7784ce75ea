"""Configuration, logging, storage access and security helpers."""
