"""
Unit tests for how-cli.

Test individual components in isolation:
- Request encoder and response decoder (classification order)
- Gemini transport (httpx.MockTransport, no network)
- Retry engine (state machine, backoff delays)
- Credential store and history log
- Terminal UI, clipboard and CLI wiring
"""
