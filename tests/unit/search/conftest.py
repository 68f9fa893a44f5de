from collections.abc import Callable, Sequence

import pytest

from spox.search import tokenize
from spox.spec import Spec, parse_spec

KEYWORDS = ("alpha", "beta", "gamma")


class KeywordEmbedder:
    """Counts fixed keywords, so tests can predict exact scores."""

    model_name: str = "keywords"

    def embed(self, text: str) -> Sequence[float]:
        tokens = tokenize(text)
        return tuple(float(tokens.count(word)) for word in KEYWORDS)


@pytest.fixture
def keyword_embedder() -> KeywordEmbedder:
    return KeywordEmbedder()


@pytest.fixture
def keyword_specs(make_spec_text: Callable[..., str]) -> list[Spec]:
    first = make_spec_text(
        "First",
        purpose="alpha",
        requirements=(
            "### Requirement: One\n\nThe system SHALL alpha beta.\n\n"
            "### Requirement: Two\n\nThe system SHALL stay quiet.\n"
        ),
    )
    second = make_spec_text(
        "Second",
        purpose="gamma",
        requirements="### Requirement: Three\n\nThe system SHALL alpha.\n",
    )
    return [parse_spec(first, "first"), parse_spec(second, "second")]


@pytest.fixture
def corpus(make_spec_text: Callable[..., str]) -> list[Spec]:
    auth = make_spec_text(
        "Auth",
        purpose="Describe how people prove who they are before reaching protected pages.",
        requirements=(
            "### Requirement: Password Authentication\n\n"
            "The system SHALL verify a password against the stored hash.\n\n"
            "### Requirement: Session Timeout\n\n"
            "The system SHALL expire idle sessions after thirty minutes.\n"
        ),
    )
    billing = make_spec_text(
        "Billing",
        purpose="Charge customers for their subscriptions each month.",
        requirements=(
            "### Requirement: Invoice Generation\n\n"
            "The system SHALL email an invoice when a billing cycle closes.\n"
        ),
    )
    return [parse_spec(auth, "auth"), parse_spec(billing, "billing")]
