import os

from faker import Faker

from jsonapi_docgen.core.examples import ExampleProvider

_TRUTHY = {"1", "true", "yes", "on"}


def get_seed() -> int | None:
    raw = os.getenv("JSONAPI_DOCGEN_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"JSONAPI_DOCGEN_SEED must be an integer, got {raw!r}") from exc


def faker_enabled() -> bool:
    return os.getenv("JSONAPI_DOCGEN_FAKER", "").strip().lower() in _TRUTHY


def get_faker_locale() -> str:
    return os.getenv("JSONAPI_DOCGEN_FAKER_LOCALE", "en_US")


def get_log_level() -> str:
    return os.getenv("JSONAPI_DOCGEN_LOG_LEVEL", "WARNING").upper()


def build_example_provider(seed: int | None = None, use_faker: bool = False, locale: str = "en_US") -> ExampleProvider:
    faker = Faker(locale) if use_faker else None
    return ExampleProvider(seed=seed, faker=faker)


def get_example_provider() -> ExampleProvider:
    """Build an ``ExampleProvider`` from ``JSONAPI_DOCGEN_*`` environment variables."""
    return build_example_provider(seed=get_seed(), use_faker=faker_enabled(), locale=get_faker_locale())
