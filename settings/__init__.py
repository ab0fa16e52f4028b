"""Settings package for the CampusConnect API."""
