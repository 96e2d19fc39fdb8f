'''
dgen: seeded, schema-driven fake records for exercising seqops.

a schema is a dict of field -> spec, where a spec is one of
  'word'                                   a faker provider name
  ('pyint', {'min_value': 1})              a faker provider with kwargs
  {'_provider': 'choice', 'from': [...]}   a uniform pick from a list
  {'_provider': 'counter', 'start': 1}     1, 2, 3, ... across generated records
  {'_provider': 'ref', 'key': 'id'}        the value of an earlier field
  {'_provider': 'literal', 'value': x}     x, unchanged
  {...}                                    a nested schema
anything else is used as a literal.
'''

import numpy as np
from faker import Faker
from seqops import from_iterable, Enumerable
from typing import Any, Dict, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._counters: Dict[int, int] = {}

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_provider"]
        if provider == "choice":
            options = config["from"]
            # index into the list so native python values come back, not numpy scalars
            return options[int(self._rng.integers(0, len(options)))]

        if provider == "counter":
            slot = id(config)
            value = self._counters.get(slot, config.get("start", 1))
            self._counters[slot] = value + config.get("step", 1)
            return value

        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_provider" in schema:
                return self._resolve_provider(schema, current_context)
            generated: Dict[str, Any] = {}
            for key, spec in schema.items():
                # refs see the parent's fields and the fields generated so far
                generated[key] = self.create(spec, {**current_context, **generated})
            return generated

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._resolve_faker_method(schema)

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def records(self, count: int) -> list:
        """generate `count` records as a plain list"""
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int) -> Enumerable:
        """generate `count` records wrapped in an enumerable"""
        return from_iterable(self.records(count))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
