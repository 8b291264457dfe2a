"""Factories for tests and prototyping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from faker import Faker

from ..domain.events import Event


@dataclass(slots=True)
class EventFactory:
    faker: Faker = field(default_factory=Faker)

    def name(self) -> str:
        return f"{self.faker.word()}.{self.faker.unique.lexify(text='????????')}"

    def build(self, event_id: str | None = None) -> Event:
        return Event(event_id or self.name())

    def names(self, count: int) -> Iterable[str]:
        for _ in range(count):
            yield self.name()
