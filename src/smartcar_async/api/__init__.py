"""HTTP client and endpoint wrappers for the Smartcar API."""
