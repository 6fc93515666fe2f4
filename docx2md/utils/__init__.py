"""Utilities for text escaping, XML names and package resources."""
