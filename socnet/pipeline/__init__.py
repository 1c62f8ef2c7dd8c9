"""Kedro pipelines for the social graph statistics project."""
