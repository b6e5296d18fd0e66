"""Shared pytest setup for nomlite.

Hypothesis budgets live here and nowhere else; individual tests only lower
them (deadline=None, smaller max_examples for thread-heavy properties).

    dev      500 examples, random seeds
    ci       50 examples, derandomized so failures reproduce across runs
    verbose  100 examples with Hypothesis progress output

HYPOTHESIS_PROFILE picks a profile by name. Without it, CI=true selects "ci"
and everything else runs "dev".

Property tests that replay grammars over every chunking of a stream are
marked @pytest.mark.fuzz and only run under `pytest -m fuzz`.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]
_PROFILES = ("dev", "ci", "verbose")

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile("dev", max_examples=500, phases=_PHASES, derandomize=False)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Declare the fuzz marker so --strict-markers accepts it."""
    config.addinivalue_line(
        "markers",
        "fuzz: streaming property tests, run with pytest -m fuzz",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz tests unless the -m expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="streaming property test; run with pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
