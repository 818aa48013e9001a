"""Configuration, logging and response helpers shared by all layers."""
