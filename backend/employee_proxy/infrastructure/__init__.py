"""Infrastructure — upstream HTTP client and logging setup."""
