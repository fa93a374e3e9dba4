"""
Integration tests for how-cli.

Test components together or against the real Gemini API:
- Gemini transport + retry engine (real calls, marked with @pytest.mark.integration)
"""
