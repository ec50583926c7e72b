"""
Application layer package.

Contains use cases that orchestrate domain logic.
Each use case is a single class with one public method.
"""
