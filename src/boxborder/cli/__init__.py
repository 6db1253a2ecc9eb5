"""Command line interface for the boxborder package."""
