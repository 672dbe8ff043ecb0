"""Smartcar Connect and OAuth2 token exchange."""
