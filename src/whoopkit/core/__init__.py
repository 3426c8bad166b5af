"""Request execution, error mapping and configuration for the WHOOP API client."""
