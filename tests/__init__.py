# Tests package
"""
Unit tests for the RocketLaunch.Live client.

Test categories:
- test_params.py: Parameter builders and query rendering
- test_models.py: Record and envelope decoding
- test_config.py: API key and base URL resolution
- test_client.py: Requests, decoding and error handling
"""
