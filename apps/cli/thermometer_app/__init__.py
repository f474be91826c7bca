"""Command line app for the donation thermometer."""
