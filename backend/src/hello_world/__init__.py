"""Lambda runtime package for the hello, countries and states functions."""
