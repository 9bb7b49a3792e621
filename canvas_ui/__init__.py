"""NiceGUI presentation layer of the Venture Canvas."""
