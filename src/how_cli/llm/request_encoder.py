"""Request encoding for the Gemini generateContent endpoint."""

from how_cli.models.llm_models import GenerateRequest


MODEL_NAMESPACE_PREFIX = "models/"


def normalize_model_name(model: str) -> str:
    """
    Strip a redundant ``models/`` prefix from a model identifier.

    The endpoint path already contains the ``models/`` segment, so
    ``"models/gemini-2.5-flash"`` and ``"gemini-2.5-flash"`` must encode
    to the same URL.

    Examples:
        >>> normalize_model_name("models/gemini-2.5-flash")
        'gemini-2.5-flash'
        >>> normalize_model_name("gemini-2.5-flash")
        'gemini-2.5-flash'
    """
    return model.strip().removeprefix(MODEL_NAMESPACE_PREFIX)


def encode_request(model: str, prompt: str) -> GenerateRequest:
    """
    Build the attempt-invariant request for one call.

    Pure and total: no I/O and no validation of the prompt (an empty
    prompt is passed through unchanged).
    """
    return GenerateRequest(model=normalize_model_name(model), prompt=prompt)


def build_endpoint(base_url: str, model: str) -> str:
    """Return ``{base_url}/models/{model}:generateContent``.

    The API key is not part of the returned URL; the transport sends it as
    the ``key`` query parameter so it never ends up in log lines.
    """
    return f"{base_url.rstrip('/')}/models/{normalize_model_name(model)}:generateContent"
