"""Data types and an HTTP client for the container API."""