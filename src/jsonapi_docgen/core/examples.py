"""Example values for documented attribute types.

Every supported type tag maps to one generator. Random values come from the
provider's own ``random.Random`` so a seeded provider yields the same examples
on every run.
"""

from __future__ import annotations

import random
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import Any

from jsonapi_docgen.core.errors import UnsupportedTypeError
from jsonapi_docgen.core.ports.resource import FakeDataProvider

STRING_EXAMPLE = "Example string"
TEXT_EXAMPLE = "Example text"
OBJECT_PLACEHOLDER = {"example": "object"}


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _slug(faker: FakeDataProvider) -> str:
    return faker.slug().replace("-", "_")


class ExampleProvider:
    def __init__(
        self,
        seed: int | None = None,
        faker: FakeDataProvider | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._rng = random.Random(seed)
        self._faker = faker
        self._clock = clock or _local_now
        if faker is not None and seed is not None:
            faker.seed_instance(seed)

        self._generators: dict[str, Callable[[], Any]] = {
            "integer": self.integer_example,
            "string": self.string_example,
            "text": self.text_example,
            "citext": self.text_example,
            "float": self.float_example,
            "date": self.date_example,
            "datetime": self.datetime_example,
            "time": self.datetime_example,
            "object": self.object_example,
            "array": self.array_example,
            "boolean": self.boolean_example,
            "uuid": self.uuid_example,
        }

    @property
    def supported_types(self) -> list[str]:
        return sorted(self._generators)

    def supports(self, type_tag: str) -> bool:
        return type_tag in self._generators

    def example_for(self, type_tag: str) -> Any:
        """Return an example value for ``type_tag``.

        Raises ``UnsupportedTypeError`` for tags outside the supported set.
        """
        try:
            generator = self._generators[type_tag]
        except (KeyError, TypeError) as exc:
            raise UnsupportedTypeError(type_tag, self.supported_types) from exc
        return generator()

    def integer_example(self) -> int:
        return 1

    def string_example(self) -> str:
        return STRING_EXAMPLE

    def text_example(self) -> str:
        return TEXT_EXAMPLE

    def float_example(self) -> float:
        return float(self._rng.randrange(10, 100))

    def date_example(self) -> str:
        return self._clock().date().isoformat()

    def datetime_example(self) -> str:
        return self._clock().isoformat(timespec="seconds")

    def object_example(self) -> dict[str, str]:
        faker = self._faker
        if faker is None:
            return dict(OBJECT_PLACEHOLDER)
        return {_slug(faker): _slug(faker)}

    def array_example(self) -> list[str]:
        return [self.string_example()]

    def boolean_example(self) -> bool:
        return self._rng.choice([True, False])

    def uuid_example(self) -> str:
        return str(uuid.UUID(int=self._rng.getrandbits(128), version=4))
