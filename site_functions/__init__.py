"""Serverless HTTP functions backing the marketing website."""
